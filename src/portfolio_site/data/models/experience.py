"""Experience model for work history entries."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.data.db import Base
from portfolio_site.data.types import JSONStringList


class Experience(Base):
    """Work experience entry.

    Attributes:
        id: Auto-incrementing primary key.
        logo: File reference of the company logo, if any.
        title: Job title/position.
        company: Name of the company/organization.
        location: Job location (free text).
        start_date: Start of employment as displayed (e.g. "Oct 2023").
        end_date: End of employment as displayed (e.g. "Present").
        description: Ordered bullet points, stored as a JSON array.
        created_at: UTC timestamp when the record was created.
    """

    __tablename__ = "experience"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    logo: Mapped[str | None] = mapped_column(Text, nullable=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    end_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    description: Mapped[list[str]] = mapped_column(JSONStringList, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
