"""Response: delivers a bot's answer back to the user who wrote a message.

A Response is built once per inbound message. send() and reply() differ
only in the reply flag passed to the API. Both validate the payload
immediately. In debug mode the payload is buffered and the callback run
before the call returns, loop or no loop. Otherwise they return an asyncio
task that completes when the Nestor API accepted the message.

Callbacks are an adapter over that future: they receive None on success
or the raised exception on failure, and may be plain functions or
coroutines. A coroutine callback is awaited before the future resolves,
so a callback that issues the next reply keeps the messages in order.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
from collections.abc import Callable, Sequence
from typing import Any

from nestor.client import NestorClient
from nestor.codec import coerce_strings, encode_strings
from nestor.config.loader import load_config
from nestor.config.schema import NestorConfig
from nestor.errors import NestorError
from nestor.models import OutboundPayload, Robot, TextMessage, WireMessage
from nestor.sink import OutboundSink

Payload = str | Sequence[str]

# Receives None on success, the exception on failure. May return an awaitable.
Callback = Callable[[BaseException | None], Any]

# asyncio future when a loop is running; a finished concurrent future for
# debug-mode calls made outside of one.
Completion = asyncio.Future[None] | concurrent.futures.Future[None]


async def _notify(callback: Callback | None, error: BaseException | None) -> None:
    if callback is None:
        return
    result = callback(error)
    if inspect.isawaitable(result):
        await result


class Response:
    """Sends text back to the user and channel of an inbound message.

    config, client and sink are optional injections. Without a config the
    auth token is read through load_config() on every call,
    so a rotated NESTOR_AUTH_TOKEN takes effect immediately. Without a
    sink, debug-mode payloads are appended to robot.to_send.
    """

    def __init__(
        self,
        robot: Robot,
        message: TextMessage,
        *,
        config: NestorConfig | None = None,
        client: NestorClient | None = None,
        sink: OutboundSink | None = None,
    ) -> None:
        self.robot = robot
        self.message = message
        self.user_uid = message.user.id
        self.channel_uid = message.user.room
        self.team_id = robot.team_id
        self._config = config
        self._client = client
        self._sink = sink
        self._tasks: set[asyncio.Future[None]] = set()

    def send(self, payload: Payload, callback: Callback | None = None) -> Completion:
        """Post payload to the user's channel as a plain message."""
        return self._dispatch(payload, reply=False, callback=callback)

    def reply(self, payload: Payload, callback: Callback | None = None) -> Completion:
        """Post payload as a reply addressed to the user."""
        return self._dispatch(payload, reply=True, callback=callback)

    def _dispatch(
        self,
        payload: Payload,
        *,
        reply: bool,
        callback: Callback | None,
    ) -> Completion:
        strings = coerce_strings(payload)

        if self.robot.debug_mode:
            sink = self._sink if self._sink is not None else self.robot.to_send
            sink.append(OutboundPayload(strings=strings, reply=reply))
            return self._complete_inline(callback)

        loop = asyncio.get_running_loop()
        wire = WireMessage(
            user_uid=self.user_uid,
            channel_uid=self.channel_uid,
            strings=encode_strings("\n".join(strings)),
            reply=reply,
        )
        task = loop.create_task(self._deliver(wire, callback))
        return self._track(task, reported=callback is not None)

    def _complete_inline(self, callback: Callback | None) -> Completion:
        """Run the callback now and hand back an already finished future.

        Works with or without a running loop. A coroutine callback is
        scheduled on the running loop, or run to completion when there is none.
        """
        result = callback(None) if callback is not None else None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(result):
                asyncio.run(result)
            done: concurrent.futures.Future[None] = concurrent.futures.Future()
            done.set_result(None)
            return done

        if inspect.isawaitable(result):
            return self._track(asyncio.ensure_future(result))
        future = loop.create_future()
        future.set_result(None)
        return future

    def _track(self, task: asyncio.Future[None], reported: bool = False) -> asyncio.Future[None]:
        """Hold a strong reference until the task finishes.

        When a callback already received the error, the exception is marked
        as retrieved so an un-awaited task does not warn on collection.
        """
        self._tasks.add(task)

        def _done(finished: asyncio.Future[None]) -> None:
            self._tasks.discard(finished)
            if reported and not finished.cancelled():
                finished.exception()

        task.add_done_callback(_done)
        return task

    async def _deliver(self, wire: WireMessage, callback: Callback | None) -> None:
        config = self._config or load_config()
        client = self._client or NestorClient(config)
        try:
            await client.post_message(self.team_id, wire, config.auth_token.get_secret_value())
        except NestorError as exc:
            await _notify(callback, exc)
            raise
        await _notify(callback, None)
