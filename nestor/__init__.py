"""Response delivery for Nestor chat bots."""

from loguru import logger

from nestor.client import NestorClient
from nestor.config.loader import load_config
from nestor.errors import APIError, NestorError, PayloadError, TransportError
from nestor.models import OutboundPayload, Robot, TextMessage, User, WireMessage
from nestor.logging import setup_logging
from nestor.response import Response
from nestor.sink import BufferSink, OutboundSink

__version__ = "0.1.0"

logger.disable("nestor")

__all__ = [
    "APIError",
    "BufferSink",
    "NestorClient",
    "NestorError",
    "OutboundPayload",
    "OutboundSink",
    "PayloadError",
    "Response",
    "Robot",
    "TextMessage",
    "TransportError",
    "User",
    "WireMessage",
    "load_config",
    "setup_logging",
]
