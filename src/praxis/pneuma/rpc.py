"""
JSON-RPC transport for Ethereum-compatible nodes.

Plain httpx over HTTP, no web3.py.  The transport owns timeouts and
connection handling; it never retries.  Errors raised here are transport
errors and are passed through by actions untouched.
"""

from __future__ import annotations

import itertools
import logging
import os
from pathlib import Path
from typing import Any, Optional

import httpx
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


# Default config directory
PRAXIS_DIR = Path.home() / ".praxis"
PRAXIS_ENV = PRAXIS_DIR / ".env"

# Default RPC endpoint (local anvil / hardhat node)
DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_MODE = "anvil"
DEFAULT_TIMEOUT = 30.0


def load_config(env_path: Optional[Path] = None) -> None:
    """Load ~/.praxis/.env into the environment, if present.

    Variables already set in the process environment win.
    """
    env_path = env_path or PRAXIS_ENV
    if env_path.exists():
        load_dotenv(env_path, override=False)


def get_rpc_url() -> str:
    """Get the RPC URL from environment or default."""
    load_config()
    return os.environ.get("PRAXIS_RPC_URL", DEFAULT_RPC_URL)


def get_mode() -> str:
    """Get the test node mode from environment or default."""
    load_config()
    return os.environ.get("PRAXIS_MODE", DEFAULT_MODE)


# ============ Errors ============


class TransportError(RuntimeError):
    """Base class for failures reaching the node or reading its reply."""


class HttpRequestError(TransportError):
    def __init__(self, url: str, method: str, error: str) -> None:
        self.url = url
        self.method = method
        self.error = error
        super().__init__(f"HTTP request to {url} failed ({method}): {error}")


class RpcResponseError(TransportError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, method: str, error: dict[str, Any]) -> None:
        self.method = method
        self.code = error.get("code")
        self.data = error.get("data")
        self.error_message = error.get("message", "")
        super().__init__(f"RPC error {self.code} ({method}): {self.error_message}")


# ============ Transport ============


class HttpTransport:
    """
    JSON-RPC 2.0 over HTTP.

    Args:
        url: Node endpoint (default: PRAXIS_RPC_URL or local node)
        timeout: Per-request timeout in seconds
        client: Pre-built httpx.Client (tests pass one with a MockTransport)
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.url = url or get_rpc_url()
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)
        self._ids = itertools.count(1)

    def request(self, method: str, params: Optional[list] = None) -> Any:
        """
        Make a JSON-RPC call.

        Args:
            method: RPC method name (e.g., "eth_getTransactionCount")
            params: Positional RPC parameters

        Returns:
            Result field from the RPC response

        Raises:
            HttpRequestError: If the request fails or the reply is not JSON
            RpcResponseError: If the node returns an error object
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": list(params or []),
            "id": next(self._ids),
        }
        logger.debug("rpc request id=%s %s %s", payload["id"], method, payload["params"])

        try:
            response = self._client.post(self.url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            raise HttpRequestError(self.url, method, str(exc)) from exc
        except ValueError as exc:
            raise HttpRequestError(self.url, method, f"invalid JSON reply: {exc}") from exc

        if not isinstance(data, dict):
            raise HttpRequestError(self.url, method, "malformed JSON-RPC reply")

        if "error" in data:
            logger.warning("rpc error reply for %s: %s", method, data["error"])
            raise RpcResponseError(method, data["error"])

        return data.get("result")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
