"""
Verb-specific request construction.
"""

import json
import logging
from typing import Any

from .exceptions import ConstructionError
from .models import OutgoingRequest, Verb

logger = logging.getLogger("theo_sdk.builder")

_NO_BODY = object()


def serialize_body(payload: Any) -> bytes:
    """
    Serialize ``payload`` to compact UTF-8 JSON.

    Raises:
        ConstructionError: If the payload is not JSON-representable
    """
    try:
        return json.dumps(
            payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ConstructionError(
            f"Payload is not JSON serializable: {e}",
            user_info={"payload_type": type(payload).__name__},
        ) from e


def build_request(
    base: OutgoingRequest, verb: Verb, body: Any = _NO_BODY
) -> OutgoingRequest:
    """
    Return a copy of ``base`` configured for ``verb``.

    GET and DELETE never carry a body. POST and PUT carry ``body`` serialized
    to JSON; a POST or PUT without a body argument is rejected.

    Args:
        base: Request holding the target URL
        verb: HTTP method
        body: Payload for POST/PUT

    Returns:
        New request instance

    Raises:
        ConstructionError: If the body cannot be serialized
    """
    verb = Verb(verb)
    if verb in (Verb.GET, Verb.DELETE):
        return base.model_copy(update={"verb": verb, "body": None})

    if body is _NO_BODY:
        raise ConstructionError(f"{verb.value} requires a body")

    return base.model_copy(update={"verb": verb, "body": serialize_body(body)})


def build_write_request(
    base: OutgoingRequest, payload: Any, for_update: bool
) -> OutgoingRequest:
    """Build a PUT when ``for_update`` is set, a POST otherwise."""
    verb = Verb.PUT if for_update else Verb.POST
    return build_request(base, verb, payload)
