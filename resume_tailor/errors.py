"""Error taxonomy for Resume Tailor.

Every failure surfaced to callers derives from ResumeTailorError and carries a
human-readable message plus the underlying exception, if any.
"""

from __future__ import annotations


class ResumeTailorError(Exception):
    """Base class for all Resume Tailor errors."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ResumeTailorError):
    """A required input is missing or empty."""


class AcquisitionError(ResumeTailorError):
    """Source text could not be acquired."""


class InvalidInputError(AcquisitionError):
    """The acquisition payload is empty or malformed (e.g. not a URL)."""


class DocumentExtractionError(AcquisitionError):
    """Text could not be extracted from a binary document."""


class RemoteFetchError(AcquisitionError):
    """A remote page could not be fetched."""


class GenerationError(ResumeTailorError):
    """The generative service failed or returned no usable content."""


class PersistenceError(ResumeTailorError):
    """History state could not be read or written."""
