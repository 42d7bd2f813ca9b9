from __future__ import annotations


class ValidationError(ValueError):
    """Raised when user input is rejected before any network call."""


class ExternalServiceError(RuntimeError):
    """Raised when an external service call fails (provider-agnostic)."""


class NetworkError(ExternalServiceError):
    """Raised when the synthesis call failed or was rejected by the service."""


class PlaybackError(RuntimeError):
    """Raised when the playback sink fails to start."""


class RequestInFlightError(RuntimeError):
    """Raised when a synthesis request is submitted while another is outstanding."""
