"""Exception hierarchy for tordoc-kit.

Annotation problems are content problems: they are raised synchronously to
the caller and never retried. Read failures happen inside the producer thread
of a dissection run and therefore travel through the unit stream instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tordoc_kit.annotations.annotation import Annotation
    from tordoc_kit.dissection.delimiter import Delimiter

__all__ = [
    "TordocError",
    "AnnotationError",
    "MalformedAnnotationError",
    "UnsupportedAnnotationError",
    "InvalidDelimiterError",
    "ReadFailureError",
    "DissectionError",
]


class TordocError(Exception):
    """Base exception for annotation, delimiter, and dissection failures."""


class AnnotationError(TordocError, ValueError):
    """Raised when a document's annotation line cannot be accepted."""

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.line = line


class MalformedAnnotationError(AnnotationError):
    """The line does not match ``@type <type> <major>.<minor>``."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Malformed document annotation: {line!r}", line)


class UnsupportedAnnotationError(AnnotationError):
    """The line is well formed but names a type/version nobody asked for."""

    def __init__(self, line: str, accepted: Iterable[Annotation]) -> None:
        self.accepted = frozenset(accepted)
        expected = ", ".join(sorted(str(a) for a in self.accepted)) or "<none>"
        super().__init__(
            f"Unsupported document annotation: {line!r} (expected one of: {expected})",
            line,
        )


class InvalidDelimiterError(TordocError, ValueError):
    """Raised when a delimiter cannot make progress through a document."""

    def __init__(self, message: str, delimiter: Delimiter) -> None:
        super().__init__(message)
        self.delimiter = delimiter


class ReadFailureError(TordocError, OSError):
    """Reading or decoding a document's content failed.

    The underlying exception is chained as ``__cause__``.
    """


class DissectionError(TordocError):
    """The producer failed for a reason other than reading the content.

    The underlying exception is chained as ``__cause__``.
    """
