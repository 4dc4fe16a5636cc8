"""
Exception hierarchy for lexsimplify.

Lookup misses are not errors: stores return ``None`` for unknown words and
the substitution policy passes such words through unchanged.
"""

from __future__ import annotations

from typing import Optional


class LexSimplifyError(Exception):
    """Base class for all errors raised by this package."""


class LoadError(LexSimplifyError):
    """A store could not be built (I/O failure or malformed data)."""


class FormatError(LoadError):
    """A record of an embeddings file is malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None, record: Optional[str] = None) -> None:
        self.line_number = line_number
        self.record = record
        if line_number is not None:
            message = f"{message} (line {line_number}: {record!r})"
        super().__init__(message)


class ProcessingError(LexSimplifyError):
    """Text processing failed; no output was written."""


class DimensionMismatchError(LexSimplifyError, ValueError):
    """Vectors or stores of different dimensions were combined."""
