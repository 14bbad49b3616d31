"""HTTP transport for posting messages to the Nestor API.

One POST per message; no retries and no backoff. Transport failures and
non-2xx answers are raised as nestor.errors exceptions.
"""

from __future__ import annotations

import httpx
from loguru import logger

from nestor.config.loader import load_config
from nestor.config.schema import NestorConfig
from nestor.errors import TransportError, raise_for_status
from nestor.models import WireMessage


class NestorClient:
    """Posts WireMessages to /teams/{team_id}/messages.

    Pass an httpx.AsyncClient to share a connection pool; the caller then
    owns its lifetime. Without one, a short-lived client is opened for each
    request.
    """

    def __init__(
        self,
        config: NestorConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or load_config()
        self._http = http_client

    @property
    def config(self) -> NestorConfig:
        return self._config

    def messages_url(self, team_id: str) -> str:
        return f"{self._config.api_base}/teams/{team_id}/messages"

    async def post_message(self, team_id: str, wire: WireMessage, token: str) -> httpx.Response:
        """POST one message and return the response once the API accepted it."""
        url = self.messages_url(team_id)
        headers = {"Authorization": token, "Content-Type": "application/json"}
        body = wire.to_body()

        logger.debug(
            "Posting outbound: team={} user={} channel={} reply={} len={}",
            team_id,
            wire.user_uid,
            wire.channel_uid,
            wire.reply,
            len(wire.strings),
        )

        try:
            if self._http is not None:
                response = await self._http.post(url, json=body, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                    response = await client.post(url, json=body, headers=headers)
        except httpx.RequestError as exc:
            raise TransportError(
                f"Cannot reach Nestor API at {url}: {exc}",
                hint="Check network access and the configured api_base.",
            ) from exc

        raise_for_status(response.status_code, team_id, response.text)
        logger.debug("Outbound accepted: team={} status={}", team_id, response.status_code)
        return response

