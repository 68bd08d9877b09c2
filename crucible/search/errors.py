"""
Errors Module - Exceptions raised before a search can begin.

An unreachable goal is not an error; it is reported through
SearchResult with status UNREACHABLE.
"""


class SearchError(Exception):
    """Base class for all crucible search errors."""


class ParseError(SearchError, ValueError):
    """Raised when grid input is empty, ragged or contains non-digit cells."""


class InvalidConfiguration(SearchError, ValueError):
    """Raised for degenerate grids or impossible movement constraints."""
