"""Payload normalization and the base64url text encoding used on the wire."""

from __future__ import annotations

import base64
from typing import Any

from nestor.errors import PayloadError


def coerce_strings(payload: Any) -> list[str]:
    """Return the payload as a list of strings without joining or splitting.

    A single string becomes a one-element list. Lists and tuples of strings
    are copied in order. Anything else is a caller error.
    """
    if isinstance(payload, str):
        return [payload]
    if isinstance(payload, (list, tuple)):
        bad = [type(item).__name__ for item in payload if not isinstance(item, str)]
        if bad:
            raise PayloadError(
                f"Payload sequence must contain only strings, got {', '.join(sorted(set(bad)))}"
            )
        return list(payload)
    raise PayloadError(
        f"Payload must be a string or a sequence of strings, got {type(payload).__name__}"
    )


def join_strings(payload: Any) -> str:
    """Join a payload into the single newline-separated text that gets sent."""
    return "\n".join(coerce_strings(payload))


def encode_strings(text: str) -> str:
    """URL-safe base64 of the UTF-8 bytes of text, with '=' padding removed."""
    return base64.urlsafe_b64encode(text.encode("utf-8")).rstrip(b"=").decode("ascii")


def decode_strings(encoded: str) -> str:
    """Inverse of encode_strings."""
    padded = encoded + "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
