"""Services"""

from portfolio_site.services.exceptions import NotFoundError, PortfolioError, ValidationError
from portfolio_site.services.file_store import FileStore, resolve_url
from portfolio_site.services.records import DeleteResult, UpdateResult

__all__ = [
    "DeleteResult",
    "FileStore",
    "NotFoundError",
    "PortfolioError",
    "UpdateResult",
    "ValidationError",
    "resolve_url",
]
