"""
Aiohttp-based HTTP adapter (asynchronous).
"""

import asyncio
from typing import Dict, Optional, Tuple

import aiohttp

from .adapter import AsyncHTTPAdapter, Exchange
from ..auth import Credential
from ..exceptions import TransportError, TimeoutError as TheoTimeoutError
from ..models import OutgoingRequest, ResponseMetadata


class AiohttpAdapter(AsyncHTTPAdapter):
    """
    Asynchronous HTTP adapter using aiohttp library.

    The session is created lazily on first use inside the running event loop
    unless one is supplied.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize aiohttp adapter.

        Args:
            session: Optional aiohttp.ClientSession instance
        """
        self._external_session = session is not None
        self.session = session

    async def send(
        self,
        request: OutgoingRequest,
        headers: Dict[str, str],
        auth: Optional[Credential] = None,
        timeout: Tuple[float, float] = (1.0, 10.0),
    ) -> Exchange:
        """
        Send HTTP request using aiohttp library.

        Raises:
            TransportError: On network connectivity issues
            TimeoutError: On request timeout
        """
        if self.session is None:
            self.session = aiohttp.ClientSession()

        connect, read = timeout
        timeout_obj = aiohttp.ClientTimeout(sock_connect=connect, sock_read=read)
        if auth is not None:
            headers = {**headers, "Authorization": auth.authorization_header()}

        try:
            async with self.session.request(
                method=request.verb.value,
                url=request.url,
                headers=headers,
                data=request.body,
                timeout=timeout_obj,
            ) as response:
                body = await response.read()
                metadata = ResponseMetadata(
                    status_code=response.status,
                    url=str(response.url),
                    reason=response.reason or "",
                    headers=dict(response.headers),
                )
                return metadata, body or None

        except asyncio.TimeoutError as e:
            raise TheoTimeoutError(
                f"Request timed out: {e}", user_info={"url": request.url}
            ) from e

        except aiohttp.ClientError as e:
            raise TransportError(
                f"Network request failed: {e}", user_info={"url": request.url}
            ) from e

    async def close(self) -> None:
        """Close the session."""
        if not self._external_session and self.session:
            await self.session.close()
