"""Data model shared by the response delivery path.

User and TextMessage describe what arrived from the chat platform.
Robot is the runtime handle a response is delivered through.
OutboundPayload is the buffered form kept in debug mode, WireMessage the
form posted to the Nestor API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class User:
    """A chat user, identified by id and the room (channel) they wrote in."""

    id: str
    room: str
    name: str = ""


@dataclass(frozen=True, slots=True)
class TextMessage:
    """An inbound text message that triggered a response."""

    user: User
    text: str


@dataclass(frozen=True, slots=True)
class OutboundPayload:
    """A response captured in memory instead of being sent (debug mode)."""

    strings: list[str]
    reply: bool = False


@dataclass(slots=True)
class Robot:
    """Runtime handle for one bot installed in one team.

    When debug_mode is set, responses are appended to to_send instead of
    being posted, so tests can inspect exactly what the bot would have said.
    """

    team_id: str
    bot_id: str
    debug_mode: bool = False
    to_send: list[OutboundPayload] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class WireMessage:
    """A response as transmitted: strings holds the base64url-encoded text."""

    user_uid: str
    channel_uid: str
    strings: str
    reply: bool = False

    def to_body(self) -> dict[str, Any]:
        return {
            "message": {
                "user_uid": self.user_uid,
                "channel_uid": self.channel_uid,
                "strings": self.strings,
                "reply": self.reply,
            }
        }
