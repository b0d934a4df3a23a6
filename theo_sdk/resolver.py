"""
Classification of a completed exchange.

The resolution policy is deliberately asymmetric:

- ``on_success`` is always invoked, even when the status was rejected or the
  transport failed. In that case it receives ``None`` as data, so absence of
  data is the only failure signal on the success channel.
- ``on_error`` is invoked once for a transport error and once more for a
  rejected status code. A single exchange can therefore produce two error
  notifications.
"""

import logging
from typing import Callable, List, Optional

from .exceptions import TheoError, UnacceptableStatusError
from .models import RequestResult, ResponseMetadata
from .status import is_acceptable

logger = logging.getLogger("theo_sdk.resolver")

SuccessCallback = Callable[[Optional[bytes], ResponseMetadata], None]
ErrorCallback = Callable[[TheoError, ResponseMetadata], None]


def resolve(
    data: Optional[bytes],
    response: ResponseMetadata,
    transport_error: Optional[TheoError] = None,
    on_success: Optional[SuccessCallback] = None,
    on_error: Optional[ErrorCallback] = None,
) -> RequestResult:
    """
    Resolve one exchange and notify the caller's callbacks.

    Args:
        data: Response body, if any bytes were received
        response: Response metadata
        transport_error: Networking failure, if any
        on_success: Called with ``(data, response)``
        on_error: Called with ``(error, response)`` zero, one or two times

    Returns:
        Result carrying the filtered data and every reported error
    """
    status_code = response.status_code
    accepted = is_acceptable(status_code)
    effective_data = data if accepted else None

    log_fields = {"url": response.url, "status_code": status_code}
    logger.debug(
        "Resolved %s -> %d (accepted=%s)", response.url, status_code, accepted, extra=log_fields
    )

    errors: List[TheoError] = []
    if transport_error is not None:
        logger.warning("Transport error for %s: %s", response.url, transport_error, extra=log_fields)
        errors.append(transport_error)
    if not accepted:
        logger.warning("Unacceptable status %d for %s", status_code, response.url, extra=log_fields)
        errors.append(UnacceptableStatusError(status_code, str(response)))

    if on_success is not None:
        on_success(effective_data, response)

    if on_error is not None:
        for error in errors:
            on_error(error, response)

    return RequestResult(
        data=effective_data,
        response=response,
        accepted=accepted,
        errors=tuple(errors),
    )
