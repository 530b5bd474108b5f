"""Education model for academic background entries."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.data.db import Base


class Education(Base):
    """Education entry.

    Attributes:
        id: Auto-incrementing primary key.
        logo: File reference of the institution logo, if any.
        degree: Degree name (e.g. Bachelor of Science in Computer Science).
        institution: Name of school/university.
        location: City or campus.
        year: Graduation year as displayed.
        created_at: UTC timestamp when the record was created.
    """

    __tablename__ = "education"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    logo: Mapped[str | None] = mapped_column(Text, nullable=True)
    degree: Mapped[str] = mapped_column(String(255), nullable=False)
    institution: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    year: Mapped[str | None] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
