"""
Asynchronous Theo request executor.
"""

import logging
import time
from typing import Any, Dict, Optional

from .auth import Credential, CredentialStore, ProtectionSpace, credential_from_config
from .builder import build_request, build_write_request
from .exceptions import ConfigurationError, TheoError, TransportError
from .http.adapter import AsyncHTTPAdapter
from .http.aiohttp_adapter import AiohttpAdapter
from .logging_setup import sanitize_headers, setup_structured_logger
from .metrics import metrics_request
from .models import ClientConfig, OutgoingRequest, RequestResult, ResponseMetadata, Verb, validate_endpoint
from .resolver import ErrorCallback, SuccessCallback, resolve
from .session import DEFAULT_HEADERS

logger = logging.getLogger("theo_sdk.async")


class AsyncTheoRequest:
    """
    Asynchronous executor for one Neo4j REST URL.

    Same operations and callback semantics as :class:`TheoRequest`, as
    coroutines. Callbacks run on the event loop before the coroutine returns.

    Examples:
        >>> import asyncio
        >>> from theo_sdk import AsyncTheoRequest
        >>>
        >>> async def main():
        ...     async with AsyncTheoRequest("http://localhost:7474/db/data/") as request:
        ...         result = await request.get_resource()
        ...         print(result.status_code)
        >>>
        >>> asyncio.run(main())
    """

    def __init__(
        self,
        url: str,
        credential: Optional[Credential] = None,
        additional_headers: Optional[Dict[str, str]] = None,
        adapter: Optional[AsyncHTTPAdapter] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout_connect: float = 1.0,
        timeout_read: float = 10.0,
    ):
        """
        Initialize async executor.

        Args:
            url: Absolute URL of the resource
            credential: Optional Basic auth credential
            additional_headers: Headers merged over the defaults
            adapter: Async HTTP adapter (defaults to AiohttpAdapter)
            headers: Default headers, replacing DEFAULT_HEADERS when given
            timeout_connect: Connection timeout in seconds
            timeout_read: Read timeout in seconds
        """
        try:
            self.url = validate_endpoint(url)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        self.http = adapter or AiohttpAdapter()
        self.timeout = (timeout_connect, timeout_read)

        merged = dict(DEFAULT_HEADERS if headers is None else headers)
        if additional_headers:
            merged.update(additional_headers)
        self._headers = merged

        self.credentials = CredentialStore()
        if credential is not None:
            self.credentials.set_credential(credential, ProtectionSpace.for_url(self.url))

    @classmethod
    def from_config(
        cls, config: ClientConfig, adapter: Optional[AsyncHTTPAdapter] = None
    ) -> "AsyncTheoRequest":
        """
        Build an executor configured from ``config``.
        """
        if config.debug:
            setup_structured_logger(logging.DEBUG)

        return cls(
            config.url,
            credential=credential_from_config(config),
            additional_headers=config.additional_headers,
            adapter=adapter,
            timeout_connect=config.timeout_connect,
            timeout_read=config.timeout_read,
        )

    async def __aenter__(self) -> "AsyncTheoRequest":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        await self.close()

    async def close(self) -> None:
        await self.http.close()

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    async def _execute(
        self,
        request: OutgoingRequest,
        on_success: Optional[SuccessCallback],
        on_error: Optional[ErrorCallback],
    ) -> RequestResult:
        logger.debug(
            "Async %s %s",
            request.verb.value,
            request.url,
            extra={"verb": request.verb.value, "url": request.url},
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Headers: %s", sanitize_headers(self._headers))

        start = time.time()
        transport_error: Optional[TheoError] = None
        try:
            response, data = await self.http.send(
                request,
                self.headers,
                auth=self.credentials.credential_for(request.url),
                timeout=self.timeout,
            )
        except TransportError as e:
            response, data, transport_error = ResponseMetadata.unavailable(request.url), None, e

        metrics_request(request.verb.value, response.status_code, time.time() - start)
        return resolve(data, response, transport_error, on_success, on_error)

    async def get_resource(
        self,
        on_success: Optional[SuccessCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> RequestResult:
        """Make HTTP GET request (async)."""
        request = build_request(OutgoingRequest(url=self.url), Verb.GET)
        return await self._execute(request, on_success, on_error)

    async def post_resource(
        self,
        payload: Any,
        for_update: bool = False,
        on_success: Optional[SuccessCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> RequestResult:
        """
        Make HTTP POST request, or PUT when ``for_update`` is set (async).

        Raises:
            ConstructionError: If ``payload`` is not JSON serializable
        """
        request = build_write_request(OutgoingRequest(url=self.url), payload, for_update)
        return await self._execute(request, on_success, on_error)

    async def delete_resource(
        self,
        on_success: Optional[SuccessCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> RequestResult:
        """Make HTTP DELETE request (async)."""
        request = build_request(OutgoingRequest(url=self.url), Verb.DELETE)
        return await self._execute(request, on_success, on_error)
