"""Runtime configuration for the portfolio site.

All settings are resolved once at startup into an immutable ``Settings``
object which is handed to the application factory. Nothing else in the
package reads the environment.

Environment variables:
    DB_URL: SQLAlchemy database URL (default ``sqlite:///<cwd>/portfolio.db``).
    PORTFOLIO_UPLOAD_DIR: Directory for uploaded logos/images (default ``<cwd>/uploads``).
    JWT_SECRET: Secret used to sign session tokens.
    PORTFOLIO_TOKEN_TTL_HOURS: Session token lifetime in hours (default 24).
    HOST / PORT: Listening address for ``portfolio-site serve``.
    PORTFOLIO_API_ORIGIN: Origin prefixed to stored file references when
        building absolute URLs (default: same origin).
    PORTFOLIO_ADMIN_USERNAME / PORTFOLIO_ADMIN_PASSWORD: Credential created on
        first startup.
    PORTFOLIO_SEED_DEMO: Insert sample experience/education rows into empty tables.
    PORTFOLIO_CORS_ORIGINS: Comma separated list of allowed CORS origins.
    LOG_LEVEL: Logging level name.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from sqlalchemy.engine import URL

DEFAULT_JWT_SECRET = "portfolio-secret-key-2024"
DEFAULT_PORT = 3001
DEFAULT_TOKEN_TTL_HOURS = 24
UPLOAD_URL_PREFIX = "/uploads"

_TRUTHY = {"1", "true", "yes", "on"}


def _default_database_url(base_dir: Path) -> str:
    db_path = base_dir / "portfolio.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _read_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _read_list(env: Mapping[str, str], name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    """Immutable application settings.

    Attributes:
        database_url: SQLAlchemy URL of the record store.
        upload_dir: Directory where uploaded files are written.
        upload_url_prefix: URL path under which ``upload_dir`` is served.
        jwt_secret: HMAC secret for session tokens.
        token_ttl: Lifetime of an issued session token.
        host: Bind address for the development server.
        port: Bind port for the development server.
        api_origin: Origin used to turn stored file references into URLs.
        admin_username: Username of the credential provisioned at startup.
        admin_password: Password of the credential provisioned at startup.
        seed_demo_content: Whether to insert sample rows into empty tables.
        cors_origins: Origins allowed by the CORS middleware.
        log_level: Logging level name.
    """

    database_url: str
    upload_dir: Path
    upload_url_prefix: str = UPLOAD_URL_PREFIX
    jwt_secret: str = DEFAULT_JWT_SECRET
    token_ttl: timedelta = field(default_factory=lambda: timedelta(hours=DEFAULT_TOKEN_TTL_HOURS))
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    api_origin: str = ""
    admin_username: str = "admin"
    admin_password: str = "admin123"
    seed_demo_content: bool = False
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, base_dir: Path | None = None
    ) -> Settings:
        """Build settings from environment variables.

        Args:
            env: Mapping to read from (defaults to ``os.environ``).
            base_dir: Directory used for the default database and upload paths
                (defaults to the current working directory).

        Raises:
            ValueError: If an integer variable cannot be parsed.
        """
        env = os.environ if env is None else env
        base = (base_dir or Path.cwd()).resolve()

        upload_raw = env.get("PORTFOLIO_UPLOAD_DIR")
        upload_dir = (
            Path(upload_raw).expanduser().resolve() if upload_raw else base / "uploads"
        )

        return cls(
            database_url=env.get("DB_URL") or _default_database_url(base),
            upload_dir=upload_dir,
            jwt_secret=env.get("JWT_SECRET") or DEFAULT_JWT_SECRET,
            token_ttl=timedelta(
                hours=_read_int(env, "PORTFOLIO_TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS)
            ),
            host=env.get("HOST") or "0.0.0.0",
            port=_read_int(env, "PORT", DEFAULT_PORT),
            api_origin=(env.get("PORTFOLIO_API_ORIGIN") or "").rstrip("/"),
            admin_username=env.get("PORTFOLIO_ADMIN_USERNAME") or "admin",
            admin_password=env.get("PORTFOLIO_ADMIN_PASSWORD") or "admin123",
            seed_demo_content=_read_bool(env, "PORTFOLIO_SEED_DEMO", False),
            cors_origins=_read_list(env, "PORTFOLIO_CORS_ORIGINS", ("*",)),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
