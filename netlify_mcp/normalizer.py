"""Error normalizer — reduce heterogeneous Netlify error bodies to one string.

The Netlify API does not use a single error shape.  Depending on the
endpoint a failure body may look like::

    {"message": "Not Found"}
    {"error": "invalid_token"}
    {"errors": [{"message": "name is taken"}, {"message": "repo is invalid"}]}

or there may be no body at all (timeout, refused connection).  ``classify``
turns the raw body into one of the explicit shapes below and ``normalize``
extracts the message in a fixed order:

1. top-level ``message``
2. top-level ``error``
3. ``errors`` list, each item's ``message`` joined with ``", "``
4. ``UNKNOWN_ERROR``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from netlify_mcp.contracts import RemoteFailure

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error occurred"


@dataclass(frozen=True)
class MessageShape:
    message: str


@dataclass(frozen=True)
class ErrorShape:
    error: str


@dataclass(frozen=True)
class ErrorsListShape:
    messages: tuple[str, ...]


@dataclass(frozen=True)
class NoShape:
    """Nothing readable in the body (or no body at all)."""


ErrorBodyShape = MessageShape | ErrorShape | ErrorsListShape | NoShape


def _text(value: Any) -> str:
    """Return *value* when it is a non-empty string, else ``""``."""
    if isinstance(value, str) and value.strip():
        return value
    return ""


def classify(body: Any) -> ErrorBodyShape:
    """Return the first recognised shape of an error *body*, in precedence order."""
    if not isinstance(body, dict):
        return NoShape()

    message = _text(body.get("message"))
    if message:
        return MessageShape(message)

    error = _text(body.get("error"))
    if error:
        return ErrorShape(error)

    errors = body.get("errors")
    if isinstance(errors, list):
        messages = tuple(
            text
            for item in errors
            if isinstance(item, dict) and (text := _text(item.get("message")))
        )
        if messages:
            return ErrorsListShape(messages)

    return NoShape()


def extract_message(shape: ErrorBodyShape) -> str:
    """Render *shape* as the caller-facing message."""
    match shape:
        case MessageShape(message=message):
            return message
        case ErrorShape(error=error):
            return error
        case ErrorsListShape(messages=messages):
            return ", ".join(messages)
        case _:
            return UNKNOWN_ERROR


def normalize(failure: RemoteFailure) -> str:
    """Return one human-readable message for a failed remote call.

    Always returns a non-empty string, whatever shape the remote side used.
    """
    shape = classify(failure.body)
    if isinstance(shape, NoShape):
        logger.debug(
            "[netlify:error] unrecognised error body  status=%s  transport=%s",
            failure.status_code, failure.transport_error,
        )
    return extract_message(shape)
