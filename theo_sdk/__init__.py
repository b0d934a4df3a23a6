"""
Theo Python SDK

Request wrapper for the Neo4j REST API: GET/POST/PUT/DELETE against a
single endpoint with Basic auth, custom headers and JSON bodies.
"""

from .__version__ import __version__
from .auth import Credential, CredentialStore, ProtectionSpace, REQUEST_REALM
from .builder import build_request, build_write_request
from .client import TheoRequest
from .async_client import AsyncTheoRequest
from .exceptions import (
    TheoError,
    ConfigurationError,
    ConstructionError,
    TransportError,
    UnacceptableStatusError,
    NETWORK_ERROR_DOMAIN,
)
from .models import ClientConfig, OutgoingRequest, RequestResult, ResponseMetadata, Verb
from .resolver import resolve
from .session import Session, DEFAULT_HEADERS
from .status import ACCEPTABLE_STATUS_CODES, is_acceptable

__all__ = [
    "TheoRequest",
    "AsyncTheoRequest",
    "Session",
    "DEFAULT_HEADERS",
    "ClientConfig",
    "Credential",
    "CredentialStore",
    "ProtectionSpace",
    "REQUEST_REALM",
    "OutgoingRequest",
    "RequestResult",
    "ResponseMetadata",
    "Verb",
    "build_request",
    "build_write_request",
    "resolve",
    "ACCEPTABLE_STATUS_CODES",
    "is_acceptable",
    "TheoError",
    "ConfigurationError",
    "ConstructionError",
    "TransportError",
    "UnacceptableStatusError",
    "NETWORK_ERROR_DOMAIN",
    "__version__",
]
