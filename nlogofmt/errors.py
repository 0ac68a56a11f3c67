"""
Exceptions raised while reading or writing .nlogo documents.

I/O failures (OSError, urllib.error.URLError) are not wrapped: they reach the
caller unchanged. Validation complaints are never raised, see
NLogoFormat.validation_errors().
"""

from __future__ import annotations


class NLogoFormatError(ValueError):
    """Base class for malformed or unsupported documents."""


class SectionCountMismatch(NLogoFormatError):
    """Splitting a document did not yield one part per known section."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected} sections separated by the model separator, found {actual}"
        )


class UnsupportedLocation(NLogoFormatError):
    """The location can't be opened for reading or resolved for writing."""


class CodecError(NLogoFormatError):
    """A section's content could not be deserialized."""

    def __init__(self, section: str, cause: Exception) -> None:
        self.section = section
        super().__init__(f"Could not read section {section}: {cause}")
