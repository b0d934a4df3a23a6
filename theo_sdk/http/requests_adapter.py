"""
Requests-based HTTP adapter (synchronous).
"""

import logging
from typing import Dict, Optional, Tuple

import requests
from requests.auth import HTTPBasicAuth

from .adapter import Exchange, HTTPAdapter
from ..auth import Credential
from ..exceptions import TransportError, TimeoutError as TheoTimeoutError
from ..models import OutgoingRequest, ResponseMetadata

logger = logging.getLogger("theo_sdk.http")


class RequestsAdapter(HTTPAdapter):
    """
    Synchronous HTTP adapter using requests library.

    Features:
    - Connection pooling via session
    - Configurable timeouts
    - Preemptive Basic authentication
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize requests adapter.

        Args:
            session: Optional requests.Session instance
        """
        self._external_session = session is not None
        self.session = session or requests.Session()

    def send(
        self,
        request: OutgoingRequest,
        headers: Dict[str, str],
        auth: Optional[Credential] = None,
        timeout: Tuple[float, float] = (1.0, 10.0),
    ) -> Exchange:
        """
        Send HTTP request using requests library.

        Raises:
            TransportError: On network connectivity issues
            TimeoutError: On request timeout
        """
        basic_auth = HTTPBasicAuth(auth.username, auth.password) if auth else None

        try:
            response = self.session.request(
                method=request.verb.value,
                url=request.url,
                headers=headers,
                data=request.body,
                auth=basic_auth,
                timeout=timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TheoTimeoutError(
                f"Request timed out: {e}", user_info={"url": request.url}
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Network request failed: {e}", user_info={"url": request.url}
            ) from e

        metadata = ResponseMetadata(
            status_code=response.status_code,
            url=response.url or request.url,
            reason=response.reason or "",
            headers=dict(response.headers),
        )
        return metadata, response.content or None

    def close(self) -> None:
        if not self._external_session:
            self.session.close()
