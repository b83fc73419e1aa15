"""
Exception types raised by the report engine and the listings loader.
"""

from __future__ import annotations

from typing import Iterable


class ListingsReportError(Exception):
    """Base class for every error raised by this package."""


class MissingColumnsError(ListingsReportError, KeyError):
    """A report was asked to run on a table that lacks one of its columns."""

    def __init__(self, report: str, missing: Iterable[str]) -> None:
        self.report = report
        self.missing = tuple(missing)
        super().__init__(f"{report}: missing required column(s): {', '.join(self.missing)}")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class EmptyInputError(ListingsReportError, ValueError):
    """The listings table has no rows where at least one is required."""


class UnsupportedSourceError(ListingsReportError, ValueError):
    """The loader does not know how to read the given source."""
