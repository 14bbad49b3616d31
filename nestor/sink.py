"""Sinks that capture outbound payloads in debug mode.

Any object with an append(OutboundPayload) method works as a sink, so a
Robot's plain to_send list is accepted as-is.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from loguru import logger

from nestor.models import OutboundPayload


@runtime_checkable
class OutboundSink(Protocol):
    """Append target for buffered responses."""

    def append(self, payload: OutboundPayload) -> None: ...


class BufferSink:
    """In-memory, append-only sink. Not thread-safe; meant for tests and debug runs."""

    def __init__(self) -> None:
        self._items: list[OutboundPayload] = []

    def append(self, payload: OutboundPayload) -> None:
        self._items.append(payload)
        logger.debug(
            "Buffered outbound: strings={} reply={} (total: {})",
            len(payload.strings),
            payload.reply,
            len(self._items),
        )

    def clear(self) -> None:
        self._items.clear()

    @property
    def last(self) -> OutboundPayload | None:
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[OutboundPayload]:
        return iter(self._items)
