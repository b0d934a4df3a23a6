"""
Theo request executor (thread based).
"""

import logging
from concurrent.futures import Future
from typing import Any, Dict, Optional

from .auth import Credential, ProtectionSpace, credential_from_config
from .builder import build_request, build_write_request
from .exceptions import ConfigurationError
from .http.adapter import HTTPAdapter
from .logging_setup import setup_structured_logger
from .models import ClientConfig, OutgoingRequest, RequestResult, Verb, validate_endpoint
from .resolver import ErrorCallback, SuccessCallback, resolve
from .session import Session


class TheoRequest:
    """
    Executes GET/POST/PUT/DELETE against one Neo4j REST URL.

    Every operation returns immediately with a ``Future[RequestResult]``.
    Callbacks, when supplied, are invoked on the session's callback thread
    before the future resolves:

    - ``on_success(data, response)`` is always called once; ``data`` is None
      unless the status code was 2xx.
    - ``on_error(error, response)`` is called once per transport error and
      once per rejected status code.

    If the adapter raises anything other than ``TransportError`` (a bug in
    the adapter, not a network failure), neither callback is called and the
    exception is set on the returned future instead.

    Example:
        >>> request = TheoRequest(
        ...     "http://localhost:7474/db/data/node/1",
        ...     credential=Credential(username="neo4j", password="secret"),
        ... )
        >>> result = request.get_resource().result()
        >>> result.ok, result.status_code
        (True, 200)
    """

    def __init__(
        self,
        url: str,
        credential: Optional[Credential] = None,
        additional_headers: Optional[Dict[str, str]] = None,
        session: Optional[Session] = None,
    ):
        """
        Initialize request executor.

        Args:
            url: Absolute URL of the resource
            credential: Optional Basic auth credential
            additional_headers: Headers merged over the session defaults
            session: Shared session (a private one is created when omitted)

        Raises:
            ConfigurationError: If the URL is not absolute or the session is
                already in use
        """
        try:
            self.url = validate_endpoint(url)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        self._owns_session = session is None
        self.session = session or Session()
        self.session.add_headers(additional_headers)

        if credential is not None:
            self.session.set_credential(credential, ProtectionSpace.for_url(self.url))

    @classmethod
    def from_config(
        cls, config: ClientConfig, adapter: Optional[HTTPAdapter] = None
    ) -> "TheoRequest":
        """
        Build an executor owning a session configured from ``config``.
        """
        if config.debug:
            setup_structured_logger(logging.DEBUG)

        request = cls(
            config.url,
            credential=credential_from_config(config),
            additional_headers=config.additional_headers,
            session=Session.from_config(config, adapter=adapter),
        )
        request._owns_session = True
        return request

    def __enter__(self) -> "TheoRequest":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def _base_request(self) -> OutgoingRequest:
        return OutgoingRequest(url=self.url)

    def _submit(
        self,
        request: OutgoingRequest,
        on_success: Optional[SuccessCallback],
        on_error: Optional[ErrorCallback],
    ) -> "Future[RequestResult]":
        def completion(data, response, transport_error):
            return resolve(data, response, transport_error, on_success, on_error)

        return self.session.submit(request, completion)

    def get_resource(
        self,
        on_success: Optional[SuccessCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> "Future[RequestResult]":
        """
        Make HTTP GET request.

        Args:
            on_success: Success callback
            on_error: Error callback

        Returns:
            Future of the request result
        """
        request = build_request(self._base_request(), Verb.GET)
        return self._submit(request, on_success, on_error)

    def post_resource(
        self,
        payload: Any,
        for_update: bool = False,
        on_success: Optional[SuccessCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> "Future[RequestResult]":
        """
        Make HTTP POST request, or PUT when ``for_update`` is set.

        Args:
            payload: JSON-serializable body
            for_update: Send PUT instead of POST
            on_success: Success callback
            on_error: Error callback

        Returns:
            Future of the request result

        Raises:
            ConstructionError: If ``payload`` is not JSON serializable. Nothing
                is submitted in that case.
        """
        request = build_write_request(self._base_request(), payload, for_update)
        return self._submit(request, on_success, on_error)

    def delete_resource(
        self,
        on_success: Optional[SuccessCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> "Future[RequestResult]":
        """
        Make HTTP DELETE request.

        Args:
            on_success: Success callback
            on_error: Error callback

        Returns:
            Future of the request result
        """
        request = build_request(self._base_request(), Verb.DELETE)
        return self._submit(request, on_success, on_error)
