"""Exceptions raised while delivering responses to the Nestor API.

Delivery never recovers locally: every failure is raised to the caller,
which decides whether to retry, report, or drop the message.
"""

from __future__ import annotations


class NestorError(Exception):
    """Base class for all response delivery errors."""

    def __init__(self, message: str, *, hint: str = "") -> None:
        self.hint = hint
        super().__init__(message)


class PayloadError(NestorError, TypeError):
    """Payload is neither a string nor a sequence of strings."""


class TransportError(NestorError):
    """Cannot reach the messaging endpoint (DNS, connect, read failures)."""


class APIError(NestorError):
    """Messaging endpoint answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        hint: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message, hint=hint)


class AuthenticationError(APIError):
    """Auth token is missing, invalid, or lacks access to the team."""


class TeamNotFoundError(APIError):
    """Team id in the request URL is unknown to the API."""


class RateLimitError(APIError):
    """API refused the message because too many were sent."""


class ServerError(APIError):
    """API returned a 5xx server error."""


_STATUS_MAP: dict[int, tuple[type[APIError], str, str]] = {
    401: (
        AuthenticationError,
        "Authentication failed: the auth token is invalid or missing.",
        "Set NESTOR_AUTH_TOKEN or auth_token in ~/.nestor/config.json.",
    ),
    403: (
        AuthenticationError,
        "Access denied: the auth token cannot post to this team.",
        "Check that the token was issued for the team the bot runs in.",
    ),
    404: (
        TeamNotFoundError,
        "Team not found.",
        "Verify the robot's team_id and the configured api_base.",
    ),
    429: (RateLimitError, "Rate limit exceeded: too many messages.", "Wait a moment and try again."),
    500: (ServerError, "Nestor API internal server error.", "Try again in a moment."),
    502: (ServerError, "Nestor API returned a bad gateway error.", "Try again in a moment."),
    503: (ServerError, "Nestor API is temporarily unavailable.", "Try again in a moment."),
}


def raise_for_status(status_code: int, team_id: str, body: str = "") -> None:
    """Raise an APIError subclass for any non-2xx status code.

    Used instead of httpx's resp.raise_for_status() so callers get the
    status, body and a hint without digging through httpx internals.
    """
    if 200 <= status_code < 300:
        return

    default_cls: type[APIError] = ServerError if status_code >= 500 else APIError
    exc_class, message, hint = _STATUS_MAP.get(
        status_code,
        (default_cls, f"Unexpected HTTP {status_code} from Nestor API.", ""),
    )

    full_message = f"[team {team_id}] {message} (HTTP {status_code})"
    if body:
        short = body[:200].replace("\n", " ")
        full_message += f"\n  Detail: {short}"

    raise exc_class(full_message, status_code=status_code, body=body, hint=hint)
