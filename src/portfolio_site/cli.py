"""Command line entry point: run the server and manage the admin account."""

from __future__ import annotations

import argparse
import getpass
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from portfolio_site.config import Settings
from portfolio_site.logging_config import configure_logging


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-site",
        description="Portfolio website with an admin dashboard.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the web server.")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes.")

    set_password = commands.add_parser("set-password", help="Set an admin password.")
    set_password.add_argument("username")

    commands.add_parser(
        "init-db", help="Create tables, the upload directory and the admin account."
    )
    return parser


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "portfolio_site.api.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )
    return 0


def _set_password(settings: Settings, username: str) -> int:
    from portfolio_site.data.db import Database
    from portfolio_site.services.auth import set_admin_password

    password = getpass.getpass("New password: ")
    if not password:
        print("Password cannot be empty.", file=sys.stderr)
        return 1
    if getpass.getpass("Repeat password: ") != password:
        print("Passwords do not match.", file=sys.stderr)
        return 1

    db = Database(settings.database_url)
    try:
        db.init()
        set_admin_password(db, username, password)
    finally:
        db.dispose()
    print(f"Password updated for {username.strip()}.")
    return 0


def _init_db(settings: Settings) -> int:
    from portfolio_site.api.main import startup
    from portfolio_site.data.db import Database
    from portfolio_site.services.file_store import FileStore

    db = Database(settings.database_url)
    try:
        startup(settings, db, FileStore(settings.upload_dir, settings.upload_url_prefix))
    finally:
        db.dispose()
    print(f"Database ready at {settings.database_url}")
    return 0


def run_cli(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Parse ``argv`` and run the selected command.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if settings is None:
        load_dotenv()
        settings = Settings.from_env()
    configure_logging(settings.log_level)
    args = _build_parser(settings).parse_args(argv)

    if args.command == "serve":
        return _serve(args)
    if args.command == "set-password":
        return _set_password(settings, args.username)
    return _init_db(settings)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.", file=sys.stderr)
        return 130
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
