"""
Mappers between the data layer and the recognition queue presentation layer.
"""

from typing import Protocol, TypeVar, assert_never

from recognizer import queue_models as ui
from recognizer import remote_result as do
from recognizer.exceptions import RecordingError
from recognizer.models import Track, TrackEntity

I = TypeVar("I", contravariant=True)
O = TypeVar("O", covariant=True)


class Mapper(Protocol[I, O]):
    """One-way conversion from one model to another."""

    def map(self, input: I) -> O:
        ...


class TrackMapper:
    """Map a persisted track to the presentation track."""

    def map(self, input: TrackEntity) -> Track:
        return Track(
            mb_id=input.mb_id,
            title=input.title,
            artist=input.artist,
            album=input.album,
            release_date=input.release_date,
            lyrics=input.lyrics,
            links=input.links,
            is_favorite=input.metadata.is_favorite,
            last_recognition_date=input.metadata.last_recognition_date,
        )


class RemoteResultMapper:
    """
    Map a data-layer recognition result to its presentation counterpart.

    Every variant maps to exactly one counterpart and carried fields are passed
    through unchanged. The nested track is converted by ``track_mapper``.
    """

    def __init__(self, track_mapper: Mapper[TrackEntity, Track]):
        self.track_mapper = track_mapper

    def map(self, input: do.RemoteRecognitionResultDo) -> ui.RemoteRecognitionResult:
        if isinstance(input, do.Success):
            return ui.Success(self.track_mapper.map(input.data))
        elif isinstance(input, do.NoMatches):
            return ui.NoMatches()
        elif isinstance(input, do.BadConnection):
            return ui.BadConnection()
        elif isinstance(input, do.BadRecording):
            cause = input.cause if input.cause is not None else RecordingError(input.message)
            return ui.BadRecording(cause, input.message)
        elif isinstance(input, do.HttpError):
            return ui.HttpError(input.code, input.message)
        elif isinstance(input, do.WrongToken):
            return ui.WrongToken(input.is_limit_reached)
        elif isinstance(input, do.UnhandledError):
            return ui.UnhandledError(input.message, input.e)
        else:
            assert_never(input)
