"""Authentication for the admin dashboard.

Credentials live in the ``admin`` table as salted PBKDF2 hashes. A
successful login issues a signed, time-limited session token (HS256 JWT)
which the client presents as ``Authorization: Bearer <token>``. Tokens are
not stored server-side, so they cannot be revoked before they expire.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
from dataclasses import dataclass
from datetime import UTC, datetime

from jose import JWTError, jwt

from portfolio_site.config import Settings
from portfolio_site.data.db import Database
from portfolio_site.data.models import AdminUser

logger = logging.getLogger(__name__)

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16
TOKEN_ALGORITHM = "HS256"


class AuthError(Exception):
    """Base class for authentication failures."""


class InvalidCredentials(AuthError):
    """Unknown username or wrong password (deliberately indistinguishable)."""


class Unauthorized(AuthError):
    """No session token was supplied."""


class Forbidden(AuthError):
    """A session token was supplied but is malformed, forged or expired."""


@dataclass(frozen=True, slots=True)
class Identity:
    """The authenticated admin carried in a session token."""

    id: int
    username: str


@dataclass(frozen=True, slots=True)
class LoginResult:
    token: str
    username: str


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
    except ValueError:
        return False

    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _PBKDF2_ITERATIONS,
    )
    return hmac.compare_digest(candidate, expected)


def ensure_admin(db: Database, username: str, password: str) -> bool:
    """Create the admin credential if it does not exist yet.

    An existing row is left untouched, so changing the configured password
    later does not rotate it.

    Returns:
        True if a new row was created.
    """
    username_clean = username.strip()
    if not username_clean or not password:
        raise ValueError("Admin username and password cannot be empty.")

    with db.session() as session:
        existing = session.query(AdminUser).filter(AdminUser.username == username_clean).first()
        if existing is not None:
            return False
        session.add(AdminUser(username=username_clean, password_hash=hash_password(password)))

    logger.info("Provisioned admin account %r", username_clean)
    return True


def set_admin_password(db: Database, username: str, password: str) -> None:
    """Replace (or create) the password of an admin account."""
    if not password:
        raise ValueError("Password cannot be empty.")
    username_clean = username.strip()

    with db.session() as session:
        admin = session.query(AdminUser).filter(AdminUser.username == username_clean).first()
        if admin is None:
            session.add(AdminUser(username=username_clean, password_hash=hash_password(password)))
        else:
            admin.password_hash = hash_password(password)

    logger.info("Password updated for admin account %r", username_clean)


def issue_token(settings: Settings, identity: Identity, now: datetime | None = None) -> str:
    """Sign a session token for ``identity`` valid for ``settings.token_ttl``."""
    issued_at = now or datetime.now(UTC)
    claims = {
        "id": identity.id,
        "username": identity.username,
        "iat": issued_at,
        "exp": issued_at + settings.token_ttl,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=TOKEN_ALGORITHM)


def login(db: Database, settings: Settings, username: str, password: str) -> LoginResult:
    """Check a username/password pair and issue a session token.

    Raises:
        InvalidCredentials: If the user does not exist or the password is wrong.
    """
    username_clean = (username or "").strip()
    if not username_clean or not password:
        raise InvalidCredentials()

    with db.session() as session:
        admin = session.query(AdminUser).filter(AdminUser.username == username_clean).first()
        if admin is None or not verify_password(password, admin.password_hash):
            logger.warning("Failed login attempt for %r", username_clean)
            raise InvalidCredentials()
        identity = Identity(id=admin.id, username=admin.username)

    return LoginResult(token=issue_token(settings, identity), username=identity.username)


def decode_token(settings: Settings, token: str) -> Identity:
    """Verify signature and expiry of a session token.

    Raises:
        Forbidden: If the token is invalid or expired.
    """
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[TOKEN_ALGORITHM])
    except JWTError as exc:
        logger.info("Rejected session token: %s", exc)
        raise Forbidden() from exc

    user_id = claims.get("id")
    username = claims.get("username")
    if not isinstance(user_id, int) or not isinstance(username, str):
        raise Forbidden()
    return Identity(id=user_id, username=username)


def authenticate(settings: Settings, authorization: str | None) -> Identity:
    """Authenticate an ``Authorization`` header value.

    Raises:
        Unauthorized: If no bearer token was supplied.
        Forbidden: If the token does not verify.
    """
    if not authorization or not authorization.strip():
        raise Unauthorized()

    parts = authorization.split(None, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise Unauthorized()
    scheme, token = parts[0], parts[1].strip()
    if scheme.lower() != "bearer":
        raise Forbidden()
    return decode_token(settings, token)
