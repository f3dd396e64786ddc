"""
Recognition results as consumed by the recognition queue screens.
"""

from dataclasses import dataclass
from typing import Optional, Union, assert_never

from recognizer.models import Track


@dataclass(frozen=True)
class Success:
    track: Track


@dataclass(frozen=True)
class NoMatches:
    pass


@dataclass(frozen=True)
class BadConnection:
    pass


@dataclass(frozen=True)
class BadRecording:
    cause: Optional[BaseException] = None
    message: str = ""


@dataclass(frozen=True)
class HttpError:
    code: int
    message: str


@dataclass(frozen=True)
class WrongToken:
    is_limit_reached: bool


@dataclass(frozen=True)
class UnhandledError:
    message: str = ""
    cause: Optional[BaseException] = None


RemoteRecognitionResult = Union[
    Success,
    NoMatches,
    BadConnection,
    BadRecording,
    HttpError,
    WrongToken,
    UnhandledError,
]


def describe(result: RemoteRecognitionResult) -> str:
    """Return the user-facing message for a recognition result."""
    if isinstance(result, Success):
        return f"{result.track.title} - {result.track.artist}"
    elif isinstance(result, NoMatches):
        return "No matches found"
    elif isinstance(result, BadConnection):
        return "Bad internet connection, check your network and try again"
    elif isinstance(result, BadRecording):
        return "The recording could not be processed, try recording again"
    elif isinstance(result, HttpError):
        return f"Recognition service error (HTTP {result.code}): {result.message}"
    elif isinstance(result, WrongToken):
        if result.is_limit_reached:
            return "API usage limit reached, try again later or set your own token"
        return "Wrong API token, check it in preferences"
    elif isinstance(result, UnhandledError):
        return f"Unexpected error: {result.message}" if result.message else "Unexpected error"
    else:
        assert_never(result)
