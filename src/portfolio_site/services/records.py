"""Shared helpers for the per-resource record services."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from portfolio_site.services.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class UpdateResult:
    """Outcome of an update.

    Attributes:
        record: The record as stored after the update.
        replaced_file: Previous file reference when a new file replaced it.
    """

    record: dict
    replaced_file: str | None = None


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """Outcome of a delete.

    Attributes:
        deleted: False when the id did not exist.
        file_ref: File reference the deleted record pointed to, if any.
    """

    deleted: bool
    file_ref: str | None = None


def clean_text(value: Any) -> str | None:
    """Strip a text value, mapping empty strings to None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def check_required(data: Mapping[str, Any], required: Iterable[str], *, partial: bool) -> None:
    """Raise ``ValidationError`` for the first required field that is empty.

    With ``partial`` only fields present in ``data`` are checked, which is
    how updates behave: omitted fields keep their stored value.
    """
    for field in required:
        if partial and field not in data:
            continue
        if clean_text(data.get(field)) is None:
            raise ValidationError(field)


def apply_updates(record: Any, data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Copy supplied text fields from ``data`` onto ``record``."""
    for field in fields:
        if field in data:
            setattr(record, field, clean_text(data[field]))
