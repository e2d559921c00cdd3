"""Exception types raised by the detector."""

from __future__ import annotations


class DetectorError(Exception):
    """Base class for all detector errors."""


class ValidationError(DetectorError, ValueError):
    """Input text is missing or blank.

    Raised per request and meant to be translated into a client-facing
    rejection by whatever surface called the classifier.
    """


class DependencyMissingError(DetectorError, RuntimeError):
    """Vocabulary, IDF or label resources could not be loaded.

    Fatal at startup: classification cannot run without the resources.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
