"""
Pneuma - Wire layer for praxis.

Provides the httpx-based JSON-RPC transport and the client handles that
actions are invoked against.
"""

from .client import (
    TEST_CLIENT_MODES,
    Client,
    TestClient,
    create_public_client,
    create_test_client,
)
from .rpc import HttpRequestError, HttpTransport, RpcResponseError, TransportError

__all__ = [
    "TEST_CLIENT_MODES",
    "Client",
    "TestClient",
    "create_public_client",
    "create_test_client",
    "HttpRequestError",
    "HttpTransport",
    "RpcResponseError",
    "TransportError",
]
