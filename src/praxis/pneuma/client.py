"""
Client handles.

A client pairs a transport with an optional target chain.  Actions only
ever call ``client.request(method, params)``; test clients also expose the
``mode`` of the node they talk to (anvil, hardhat, ganache), which
prefixes the node-specific RPC methods.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from ..chains import Chain
from .rpc import HttpTransport, get_mode


TEST_CLIENT_MODES = ("anvil", "hardhat", "ganache")


class Transport(Protocol):
    def request(self, method: str, params: Optional[list] = None) -> Any:
        ...


class Client:
    def __init__(self, transport: Transport, chain: Optional[Chain] = None) -> None:
        self.transport = transport
        self.chain = chain

    def request(self, method: str, params: Optional[list] = None) -> Any:
        return self.transport.request(method, list(params or []))

    def close(self) -> None:
        """Release the transport's connections, if it holds any."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class TestClient(Client):
    """Client for a local development node that supports test methods."""

    def __init__(
        self,
        transport: Transport,
        mode: str,
        chain: Optional[Chain] = None,
    ) -> None:
        if mode not in TEST_CLIENT_MODES:
            raise ValueError(
                f"Unsupported test client mode: {mode!r} "
                f"(expected one of {', '.join(TEST_CLIENT_MODES)})"
            )
        super().__init__(transport, chain=chain)
        self.mode = mode


def create_public_client(
    url: Optional[str] = None,
    chain: Optional[Chain] = None,
    timeout: float = 30.0,
) -> Client:
    """Create a client over HTTP (url defaults to PRAXIS_RPC_URL)."""
    return Client(HttpTransport(url, timeout=timeout), chain=chain)


def create_test_client(
    mode: Optional[str] = None,
    url: Optional[str] = None,
    chain: Optional[Chain] = None,
    timeout: float = 30.0,
) -> TestClient:
    """Create a test client over HTTP (mode defaults to PRAXIS_MODE)."""
    return TestClient(
        HttpTransport(url, timeout=timeout),
        mode=mode or get_mode(),
        chain=chain,
    )
