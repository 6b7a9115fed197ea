"""Shared configuration values for festivals modules."""

from __future__ import annotations

DATE_FORMAT = "%d-%m-%Y"
MONTH_NOT_FOUND = -1

_date_format_override: str | None = None


def configure(*, date_format: str | None = None) -> None:
    global _date_format_override
    if date_format is not None:
        _date_format_override = date_format


def get_date_format() -> str:
    if _date_format_override is not None:
        return _date_format_override
    return DATE_FORMAT


def _reset() -> None:
    """Reset runtime overrides. For testing only."""
    global _date_format_override
    _date_format_override = None
