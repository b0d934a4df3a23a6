"""
Exception classes for Theo SDK.

Every error carries the same three fields so that transport failures and
derived status errors can be handled uniformly by ``on_error`` callbacks:

- ``domain``: namespaced error identifier
- ``code``: numeric error code
- ``user_info``: string details
"""

from typing import Dict, Optional

NETWORK_ERROR_DOMAIN = "com.theo.network.error"
SDK_ERROR_DOMAIN = "com.theo.sdk.error"

# Matches the platform's "unknown URL error" code.
UNKNOWN_ERROR_CODE = -1

UNACCEPTABLE_STATUS_MESSAGE = "There was an error processing the request"


class TheoError(Exception):
    """Base exception for all Theo SDK errors."""

    default_domain = SDK_ERROR_DOMAIN

    def __init__(
        self,
        message: str,
        domain: Optional[str] = None,
        code: int = UNKNOWN_ERROR_CODE,
        user_info: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize error.

        Args:
            message: Error message
            domain: Error domain (defaults to the class domain)
            code: Numeric error code
            user_info: Additional string details
        """
        super().__init__(message)
        self.message = message
        self.domain = domain or self.default_domain
        self.code = code
        self.user_info = dict(user_info or {})

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"domain={self.domain!r}, code={self.code})"
        )


class ConfigurationError(TheoError):
    """SDK configuration error"""

    pass


class ConstructionError(TheoError):
    """
    Request construction error.

    Raised before any network I/O when a payload cannot be serialized to
    JSON. A request that fails construction is never submitted.
    """

    pass


class TransportError(TheoError):
    """
    Network connectivity error.

    Reported through the error channel when the exchange fails below HTTP
    (DNS, refused connection, TLS, timeout). The original exception is kept
    as ``__cause__``.
    """

    default_domain = NETWORK_ERROR_DOMAIN


class TimeoutError(TransportError):
    """Request timeout error."""

    pass


class UnacceptableStatusError(TheoError):
    """
    Derived error for a response whose status code is outside 200-299.

    Reported in addition to, not instead of, any transport error.
    """

    default_domain = NETWORK_ERROR_DOMAIN

    def __init__(self, status_code: int, response_description: str):
        """
        Initialize derived status error.

        Args:
            status_code: HTTP status code of the response
            response_description: Text description of the response metadata
        """
        super().__init__(
            UNACCEPTABLE_STATUS_MESSAGE,
            domain=NETWORK_ERROR_DOMAIN,
            code=UNKNOWN_ERROR_CODE,
            user_info={
                "message": UNACCEPTABLE_STATUS_MESSAGE,
                "status_code": str(status_code),
                "response": response_description,
            },
        )
        self.status_code = status_code

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"
