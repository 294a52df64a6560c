"""Errors raised by the misinformation detection pipeline."""


class MisinfoDetectorError(Exception):
    """Base class for all pipeline errors."""


class InputValidationError(MisinfoDetectorError, ValueError):
    """Raised when the input text is empty; no external call has been made."""


class ConfigurationError(MisinfoDetectorError):
    """Raised when the service is misconfigured (e.g. missing credentials)."""


class AnalysisFailedError(MisinfoDetectorError):
    """Raised when the pipeline fails unexpectedly. Carries no partial result."""
