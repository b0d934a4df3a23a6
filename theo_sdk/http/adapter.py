"""
Base HTTP adapter interfaces.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from ..auth import Credential
from ..models import OutgoingRequest, ResponseMetadata

Exchange = Tuple[ResponseMetadata, Optional[bytes]]


class HTTPAdapter(ABC):
    """
    Abstract base class for blocking HTTP adapters.

    Adapters perform exactly one exchange per call and never retry.
    """

    @abstractmethod
    def send(
        self,
        request: OutgoingRequest,
        headers: Dict[str, str],
        auth: Optional[Credential] = None,
        timeout: Tuple[float, float] = (1.0, 10.0),
    ) -> Exchange:
        """
        Send HTTP request.

        Args:
            request: Request to send
            headers: Request headers
            auth: Optional Basic auth credential
            timeout: (connect, read) timeouts in seconds

        Returns:
            Tuple of (response_metadata, response_body)

        Raises:
            TransportError: On network connectivity issues
            TimeoutError: On request timeout
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release transport resources."""


class AsyncHTTPAdapter(ABC):
    """Abstract base class for asyncio HTTP adapters."""

    @abstractmethod
    async def send(
        self,
        request: OutgoingRequest,
        headers: Dict[str, str],
        auth: Optional[Credential] = None,
        timeout: Tuple[float, float] = (1.0, 10.0),
    ) -> Exchange:
        """Async counterpart of :meth:`HTTPAdapter.send`."""
        raise NotImplementedError

    async def close(self) -> None:
        """Release transport resources."""
