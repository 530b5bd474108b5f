"""Admin credential model.

A single row is expected in normal operation; it is provisioned on first
startup. Passwords are stored as salted PBKDF2 hashes, never in plaintext.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.data.db import Base


class AdminUser(Base):
    """Admin account.

    Attributes:
        id: Auto-incrementing primary key.
        username: Unique handle used for login.
        password_hash: Salted hash of the password (``salt_hex:hash_hex``).
        created_at: UTC timestamp when the account was created.
    """

    __tablename__ = "admin"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
