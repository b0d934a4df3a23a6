"""
Shared network session.

A ``Session`` bundles everything requests have in common: the transport
adapter, default headers, the credential store, timeouts, and the two
executors that run the exchange and deliver its completion. It is built
explicitly and handed to executors; there is no process-wide instance.

Configuration is writable only until the first request is submitted.
"""

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, Optional, TypeVar

from .__version__ import __version__
from .auth import Credential, CredentialStore, ProtectionSpace
from .exceptions import ConfigurationError, TheoError, TransportError
from .http.adapter import HTTPAdapter
from .http.requests_adapter import RequestsAdapter
from .logging_setup import sanitize_headers
from .metrics import metrics_request
from .models import ClientConfig, OutgoingRequest, ResponseMetadata

logger = logging.getLogger("theo_sdk.session")

T = TypeVar("T")

Completion = Callable[[Optional[bytes], ResponseMetadata, Optional[TheoError]], T]

DEFAULT_HEADERS = {
    "Accept": "application/json; charset=UTF-8",
    "Content-Type": "application/json",
    "User-Agent": f"theo-python-sdk/{__version__}",
}


class Session:
    """
    Session provider for Theo requests.

    Exchanges run on an I/O thread pool. Every completion, for every request,
    is delivered on one dedicated callback thread, so callbacks never run
    concurrently with each other. Completion order across requests is not
    defined.

    Example:
        >>> session = Session(headers={"Accept": "application/json"})
        >>> session.add_headers({"X-Stream": "true"})
        >>> request = TheoRequest("http://localhost:7474/db/data/", session=session)
    """

    def __init__(
        self,
        adapter: Optional[HTTPAdapter] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout_connect: float = 1.0,
        timeout_read: float = 10.0,
        max_workers: int = 4,
    ):
        """
        Initialize session.

        Args:
            adapter: HTTP adapter (defaults to RequestsAdapter)
            headers: Default headers, replacing DEFAULT_HEADERS when given
            timeout_connect: Connection timeout in seconds
            timeout_read: Read timeout in seconds
            max_workers: Threads performing network I/O
        """
        self.adapter = adapter or RequestsAdapter()
        self._headers: Dict[str, str] = dict(DEFAULT_HEADERS if headers is None else headers)
        self.credentials = CredentialStore()
        self.timeout = (timeout_connect, timeout_read)
        self._io_pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="theo-io")
        self._callback_queue = ThreadPoolExecutor(max_workers=1, thread_name_prefix="theo-callbacks")
        self._frozen = False
        self._callback_thread: Optional[int] = None
        self._closed = False

    @classmethod
    def from_config(cls, config: ClientConfig, adapter: Optional[HTTPAdapter] = None) -> "Session":
        return cls(
            adapter=adapter,
            timeout_connect=config.timeout_connect,
            timeout_read=config.timeout_read,
            max_workers=config.max_workers,
        )

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def headers(self) -> Dict[str, str]:
        """Copy of the effective default headers."""
        return dict(self._headers)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ConfigurationError("Session configuration is read-only once requests are issued")

    def add_headers(self, additional: Optional[Dict[str, str]]) -> None:
        """
        Merge ``additional`` over the default headers.

        Supplied keys win on collision; ``None`` is a no-op.
        """
        if additional is None:
            return
        self._check_mutable()
        self._headers.update(additional)

    def set_credential(self, credential: Credential, space: ProtectionSpace) -> None:
        self._check_mutable()
        self.credentials.set_credential(credential, space)

    def submit(self, request: OutgoingRequest, completion: Completion) -> "Future[T]":
        """
        Submit ``request`` without blocking.

        ``completion(data, response, transport_error)`` runs on the callback
        thread and its return value becomes the future's result. Cancelling
        the future before delivery skips both the exchange and the completion.

        Args:
            request: Request to send
            completion: Resolution function

        Returns:
            Future of the completion's return value
        """
        if self._closed:
            raise ConfigurationError("Session is closed")
        self._frozen = True

        headers = self.headers
        auth = self.credentials.credential_for(request.url)
        future: "Future[T]" = Future()

        logger.debug(
            "%s %s",
            request.verb.value,
            request.url,
            extra={"verb": request.verb.value, "url": request.url},
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Headers: %s", sanitize_headers(headers))

        def deliver(data, response, error):
            self._callback_thread = threading.get_ident()
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = completion(data, response, error)
            except Exception as e:
                logger.exception("Completion for %s %s failed", request.verb.value, request.url)
                future.set_exception(e)
            else:
                future.set_result(result)

        def exchange():
            if future.cancelled():
                return
            start = time.time()
            error: Optional[TheoError] = None
            try:
                response, data = self.adapter.send(request, headers, auth=auth, timeout=self.timeout)
            except TransportError as e:
                response, data, error = ResponseMetadata.unavailable(request.url), None, e
            except Exception as e:
                logger.exception("Adapter failed for %s %s", request.verb.value, request.url)
                if future.set_running_or_notify_cancel():
                    future.set_exception(e)
                return
            metrics_request(request.verb.value, response.status_code, time.time() - start)
            self._callback_queue.submit(deliver, data, response, error)

        self._io_pool.submit(exchange)
        return future

    def close(self) -> None:
        """
        Wait for in-flight requests, then release threads and the adapter.

        Called from a callback, queued completions still run but are not
        waited for, since the callback thread cannot join itself.
        """
        if self._closed:
            return
        self._closed = True
        self._io_pool.shutdown(wait=True)
        in_callback = threading.get_ident() == self._callback_thread
        self._callback_queue.shutdown(wait=not in_callback)
        self.adapter.close()
