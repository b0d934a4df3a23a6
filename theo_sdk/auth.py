"""
Credential storage keyed by protection space.
"""

import base64
import logging
from typing import Dict, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

from .models import ClientConfig

logger = logging.getLogger("theo_sdk.auth")

REQUEST_REALM = "neo4j graphdb"
AUTH_METHOD_BASIC = "Basic"

_DEFAULT_PORTS = {"http": 80, "https": 443}


class Credential(BaseModel):
    """Basic auth username/password pair"""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)

    def authorization_header(self) -> str:
        """Value of the ``Authorization`` header for Basic auth."""
        token = f"{self.username}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(token).decode("ascii")


class ProtectionSpace(BaseModel):
    """Server area a credential applies to"""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    scheme: str
    realm: str = REQUEST_REALM
    authentication_method: str = AUTH_METHOD_BASIC

    @classmethod
    def for_url(cls, url: str, realm: str = REQUEST_REALM) -> "ProtectionSpace":
        """
        Derive the protection space of ``url``.

        A URL without an explicit port uses its scheme's default port.
        """
        parts = urlsplit(url)
        scheme = parts.scheme.lower()
        port = parts.port or _DEFAULT_PORTS.get(scheme, 0)
        return cls(host=(parts.hostname or "").lower(), port=port, scheme=scheme, realm=realm)

    def matches(self, url: str) -> bool:
        other = ProtectionSpace.for_url(url, realm=self.realm)
        return (self.host, self.port, self.scheme) == (other.host, other.port, other.scheme)


class CredentialStore:
    """
    Credentials installed once per protection space.

    Lookups by URL ignore the realm: Basic auth is sent preemptively, so the
    server's challenge realm is never consulted.
    """

    def __init__(self):
        self._credentials: Dict[ProtectionSpace, Credential] = {}

    def set_credential(self, credential: Credential, space: ProtectionSpace) -> None:
        logger.debug(
            "Credential installed for %s://%s:%d (realm %r)",
            space.scheme,
            space.host,
            space.port,
            space.realm,
        )
        self._credentials[space] = credential

    def credential_for(self, url: str) -> Optional[Credential]:
        for space, credential in self._credentials.items():
            if space.matches(url):
                return credential
        return None

    def __len__(self) -> int:
        return len(self._credentials)


def credential_from_config(config: ClientConfig) -> Optional[Credential]:
    """
    Build the Basic auth credential described by ``config``, if any.

    A password without a username is ignored with a warning.
    """
    if config.username:
        return Credential(username=config.username, password=config.password or "")
    if config.password:
        logger.warning("THEO password set without a username; credential ignored")
    return None
