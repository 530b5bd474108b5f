"""Helpers for storing and serving uploaded logos and images.

Files are written flat into one directory which the app serves statically
under ``url_prefix``. Stored references are root-relative paths such as
``/uploads/1712345678901-123456789.png`` and can be used directly as URL paths.
"""

from __future__ import annotations

import logging
import random
import time
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)

_SUFFIX_MAX = 10**9
_EXTERNAL_SCHEMES = ("http://", "https://")


def is_external_reference(reference: str) -> bool:
    """Return True if the reference is an absolute URL hosted elsewhere."""
    return reference.lower().startswith(_EXTERNAL_SCHEMES)


def resolve_url(reference: str | None, origin: str = "") -> str | None:
    """Turn a stored file reference into a fetchable URL.

    Absolute URLs are returned unchanged; root-relative paths are prefixed
    with ``origin`` (which may be empty for same-origin use).
    """
    if not reference:
        return None
    if is_external_reference(reference):
        return reference
    return f"{origin.rstrip('/')}{reference}"


class FileStore:
    """Flat on-disk store for uploaded files."""

    def __init__(self, root: Path, url_prefix: str = "/uploads") -> None:
        self.root = Path(root)
        self.url_prefix = "/" + url_prefix.strip("/")

    def ensure_root(self) -> Path:
        """Create the storage directory if needed and return it."""
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def generate_name(self, original_filename: str | None) -> str:
        """Return a new file name keeping the original extension.

        The name is the current time in milliseconds plus a random suffix,
        e.g. ``1712345678901-48213377.jpg``.
        """
        extension = PurePosixPath(original_filename or "").suffix
        millis = time.time_ns() // 1_000_000
        return f"{millis}-{random.randrange(_SUFFIX_MAX)}{extension}"

    def store(self, content: bytes, original_filename: str | None) -> str:
        """Write ``content`` under a fresh name and return its reference."""
        root = self.ensure_root()
        name = self.generate_name(original_filename)
        target = root / name
        while target.exists():
            name = self.generate_name(original_filename)
            target = root / name
        target.write_bytes(content)
        reference = f"{self.url_prefix}/{name}"
        logger.info("Stored upload %r as %s (%d bytes)", original_filename, reference, len(content))
        return reference

    def resolve(self, reference: str | None, origin: str = "") -> str | None:
        """Return a fetchable URL for ``reference``; see ``resolve_url``."""
        return resolve_url(reference, origin)

    def path_for(self, reference: str | None) -> Path | None:
        """Return the on-disk path of a reference owned by this store, else None."""
        if not reference or is_external_reference(reference):
            return None
        prefix = f"{self.url_prefix}/"
        if not reference.startswith(prefix):
            return None
        name = reference[len(prefix) :]
        # Only flat names; anything with a separator is not ours.
        if not name or "/" in name or "\\" in name or name in {".", ".."}:
            return None
        return self.root / name

    def discard(self, reference: str | None) -> bool:
        """Delete a stored file. Returns True if a file was removed."""
        path = self.path_for(reference)
        if path is None or not path.is_file():
            return False
        path.unlink(missing_ok=True)
        logger.info("Discarded upload %s", reference)
        return True
