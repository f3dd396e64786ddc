"""
Data-layer outcomes of a remote recognition attempt.

Every attempt produces exactly one of the variants below. The union is closed:
code that dispatches on it ends with ``assert_never`` so that a new variant is
reported by the type checker at each dispatch site.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union, assert_never

from recognizer.models import TrackEntity


@dataclass(frozen=True)
class Success:
    data: TrackEntity


@dataclass(frozen=True)
class NoMatches:
    pass


@dataclass(frozen=True)
class BadConnection:
    pass


@dataclass(frozen=True)
class BadRecording:
    message: str
    cause: Optional[BaseException] = None


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
    e: Optional[BaseException] = None


RemoteRecognitionResultDo = Union[
    Success,
    NoMatches,
    BadConnection,
    BadRecording,
    HttpError,
    WrongToken,
    UnhandledError,
]


class RemoteRecognitionResultType(Enum):
    """Result tag stored alongside an enqueued recognition."""

    SUCCESS = "Success"
    NO_MATCHES = "NoMatches"
    BAD_CONNECTION = "BadConnection"
    BAD_RECORDING = "BadRecording"
    AUTH_ERROR = "AuthError"
    API_USAGE_LIMITED = "ApiUsageLimited"
    HTTP_ERROR = "HttpError"
    UNHANDLED_ERROR = "UnhandledError"


def result_type_of(result: RemoteRecognitionResultDo) -> RemoteRecognitionResultType:
    """Return the storage tag for a recognition result."""
    if isinstance(result, Success):
        return RemoteRecognitionResultType.SUCCESS
    elif isinstance(result, NoMatches):
        return RemoteRecognitionResultType.NO_MATCHES
    elif isinstance(result, BadConnection):
        return RemoteRecognitionResultType.BAD_CONNECTION
    elif isinstance(result, BadRecording):
        return RemoteRecognitionResultType.BAD_RECORDING
    elif isinstance(result, HttpError):
        return RemoteRecognitionResultType.HTTP_ERROR
    elif isinstance(result, WrongToken):
        if result.is_limit_reached:
            return RemoteRecognitionResultType.API_USAGE_LIMITED
        return RemoteRecognitionResultType.AUTH_ERROR
    elif isinstance(result, UnhandledError):
        return RemoteRecognitionResultType.UNHANDLED_ERROR
    else:
        assert_never(result)
