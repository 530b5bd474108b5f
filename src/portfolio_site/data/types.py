"""Custom column types used by the ORM models."""

from __future__ import annotations

import json
import logging
from typing import Any

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

logger = logging.getLogger(__name__)


def encode_string_list(items: list[str] | None) -> str:
    """Serialize an ordered list of strings as a JSON array."""
    return json.dumps([str(item) for item in items or []])


def decode_string_list(raw: str | None) -> list[str]:
    """Parse a JSON array column value back into a list of strings.

    NULL, empty and malformed values read back as an empty list.
    """
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed JSON list column value: %.40r", raw)
        return []
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


class JSONStringList(TypeDecorator):
    """Ordered list of strings stored as JSON array text.

    Python side is always a ``list[str]``; the database side is TEXT.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        return encode_string_list(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> list[str]:
        return decode_string_list(value)
