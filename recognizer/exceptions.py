"""
Custom exceptions for musicrecognizer.
"""


class RecognizerError(Exception):
    """Base exception for all musicrecognizer errors."""


class ConfigError(RecognizerError):
    """Configuration errors."""


class DeepLinkError(RecognizerError):
    """Deep link URIs that do not point at a known destination."""


class TrackNotFoundError(RecognizerError):
    """Library lookups for an unknown track id."""


class RecordingError(RecognizerError):
    """Unusable recording reported by the recognition service."""
