"""Strict lookup of values in decoded JSON documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class ParseError(ValueError):
    """Raised when a document lacks a required value."""

    def __init__(self, message: str = "Couldn't parse") -> None:
        super().__init__(message)


def get_or_throw(mapping: Any, key: str) -> Any:
    """Return ``mapping[key]``, raising ParseError when it is absent."""
    if not isinstance(mapping, Mapping):
        raise ParseError()
    try:
        return mapping[key]
    except KeyError:
        raise ParseError() from None