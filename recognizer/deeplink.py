"""
Deep links used by recognition notifications.

The router only builds navigation directives; the host shell is responsible for
activating them. Identifiers are not validated here.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Union
from urllib.parse import quote, unquote, urlsplit

from recognizer.exceptions import DeepLinkError

ACTION_VIEW = "android.intent.action.VIEW"
FLAG_ACTIVITY_NEW_TASK = "FLAG_ACTIVITY_NEW_TASK"

TRACK_HOST = "track"
RECOGNITION_QUEUE_HOST = "recognition-queue"


class TrackScreen:
    @staticmethod
    def create_deep_link(mb_id: str, scheme: str = "app") -> str:
        # No safe characters so that "/" and "?" in an id survive the round trip
        return f"{scheme}://{TRACK_HOST}/{quote(mb_id, safe='')}"


class RecognitionQueueScreen:
    @staticmethod
    def create_deep_link(scheme: str = "app") -> str:
        return f"{scheme}://{RECOGNITION_QUEUE_HOST}"


@dataclass(frozen=True)
class DeepLinkIntent:
    """Navigation directive that opens the app at a deep link."""

    uri: str
    target: str
    action: str = ACTION_VIEW
    flags: FrozenSet[str] = field(default_factory=lambda: frozenset({FLAG_ACTIVITY_NEW_TASK}))


class NotificationServiceRouter:
    """Build deep link intents for recognition notifications."""

    def __init__(self, scheme: str = "app", target: str = "MainActivity"):
        self.scheme = scheme
        self.target = target

    def get_deep_link_intent_to_track(self, mb_id: str) -> DeepLinkIntent:
        return self._get_deep_link_intent(TrackScreen.create_deep_link(mb_id, self.scheme))

    def get_deep_link_intent_to_recognition_queue(self) -> DeepLinkIntent:
        return self._get_deep_link_intent(RecognitionQueueScreen.create_deep_link(self.scheme))

    def _get_deep_link_intent(self, uri: str) -> DeepLinkIntent:
        return DeepLinkIntent(uri=uri, target=self.target)


@dataclass(frozen=True)
class TrackDestination:
    mb_id: str


@dataclass(frozen=True)
class RecognitionQueueDestination:
    pass


DeepLinkDestination = Union[TrackDestination, RecognitionQueueDestination]


def parse_deep_link(uri: str, scheme: str = "app") -> DeepLinkDestination:
    """
    Parse a deep link back into its destination.

    Args:
        uri: Deep link URI produced by one of the screen builders
        scheme: Expected URI scheme

    Returns:
        TrackDestination or RecognitionQueueDestination

    Raises:
        DeepLinkError: If the URI does not point at a known destination
    """
    parts = urlsplit(uri)
    if parts.scheme != scheme:
        raise DeepLinkError(f"Unexpected deep link scheme: {uri}")

    if parts.netloc == RECOGNITION_QUEUE_HOST and parts.path in ("", "/"):
        return RecognitionQueueDestination()

    if parts.netloc == TRACK_HOST:
        encoded_id = parts.path[1:] if parts.path.startswith("/") else ""
        if encoded_id and "/" not in encoded_id:
            return TrackDestination(unquote(encoded_id))

    raise DeepLinkError(f"Unknown deep link destination: {uri}")
