# badlogvis/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all badlogvis exceptions."""


# ---- Validation / construction errors ----
class InvalidSeries(CoreError):
    """Raised when a Series is built from misaligned or non-1D arrays."""


class InvalidChannel(CoreError):
    """Raised when a Topic / Log is constructed with invalid inputs."""


class InvalidValue(CoreError):
    """Raised when two free-standing values share a name but disagree."""


class InvalidDirective(CoreError):
    """Raised when a directive token is malformed (e.g. ``join:`` with no target)."""


class AmbiguousXAxis(CoreError):
    """Raised when more than one topic carries the xaxis attribute."""


class InvalidJoin(CoreError):
    """Raised when a join targets a graph that cannot host joined series."""


class InputError(CoreError):
    """Raised when the input header or value matrix cannot be read."""


# ---- Recoverable parse result ----
class UnrecognizedAttribute(CoreError, ValueError):
    """Raised by parse_attribute for unknown tokens; callers warn and drop it."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class TopicNotFound(CoreError, KeyError):
    """Raised when a requested topic name is not present."""
