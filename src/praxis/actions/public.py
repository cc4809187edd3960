"""
Public actions - Read chain state through standard eth_* methods.

Each action borrows a client, issues exactly one request, and decodes the
hex quantity it gets back.  Transport errors propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..pneuma.client import Client
from ..utils import hex_to_number, number_to_hex


BLOCK_TAGS = ("latest", "earliest", "pending", "safe", "finalized")


@dataclass(frozen=True)
class BlockSelector:
    """
    Which block a query runs against: either a number or a tag, never both.

    Build with ``BlockSelector.by_number(n)``, ``BlockSelector.by_tag(t)``
    or ``BlockSelector.of(block_number=..., block_tag=...)``.
    """
    number: Optional[int] = None
    tag: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.number is None) == (self.tag is None):
            raise ValueError("BlockSelector needs exactly one of number or tag")
        if self.number is not None:
            if isinstance(self.number, bool) or not isinstance(self.number, int):
                raise TypeError(f"Block number must be an int, got {self.number!r}")
            if self.number < 0:
                raise ValueError(f"Block number must be non-negative: {self.number}")
        elif self.tag not in BLOCK_TAGS:
            raise ValueError(
                f"Invalid block tag: {self.tag!r} (expected one of {', '.join(BLOCK_TAGS)})"
            )

    @classmethod
    def by_number(cls, number: int) -> "BlockSelector":
        return cls(number=number)

    @classmethod
    def by_tag(cls, tag: str) -> "BlockSelector":
        return cls(tag=tag)

    @classmethod
    def of(
        cls,
        block_number: Optional[int] = None,
        block_tag: Optional[str] = None,
        default_tag: str = "latest",
    ) -> "BlockSelector":
        """Build from the two optional action arguments.

        Raises:
            ValueError: If both block_number and block_tag are given
        """
        if block_number is not None and block_tag is not None:
            raise ValueError("Pass either block_number or block_tag, not both")
        if block_number is not None:
            return cls.by_number(block_number)
        return cls.by_tag(block_tag if block_tag is not None else default_tag)

    def to_param(self) -> str:
        if self.number is not None:
            return number_to_hex(self.number)
        return self.tag  # type: ignore[return-value]


def get_transaction_count(
    client: Client,
    address: str,
    block_number: Optional[int] = None,
    block_tag: Optional[str] = None,
) -> int:
    """
    Get the number of transactions an account has sent (its nonce).

    Args:
        client: Client to use
        address: 0x-prefixed account address
        block_number: Pin the query to this block
        block_tag: Symbolic block instead (default: "latest")

    Returns:
        Transaction count

    Raises:
        ValueError: If both block_number and block_tag are given
    """
    block = BlockSelector.of(block_number=block_number, block_tag=block_tag)
    count = client.request("eth_getTransactionCount", [address, block.to_param()])
    return hex_to_number(count)


def get_balance(
    client: Client,
    address: str,
    block_number: Optional[int] = None,
    block_tag: Optional[str] = None,
) -> int:
    """
    Get the balance of an address in wei.

    Args:
        client: Client to use
        address: 0x-prefixed account address
        block_number: Pin the query to this block
        block_tag: Symbolic block instead (default: "latest")

    Returns:
        Balance in wei
    """
    block = BlockSelector.of(block_number=block_number, block_tag=block_tag)
    balance = client.request("eth_getBalance", [address, block.to_param()])
    return hex_to_number(balance)


def get_block_number(client: Client) -> int:
    """Get the number of the most recent block."""
    return hex_to_number(client.request("eth_blockNumber", []))


def get_chain_id(client: Client) -> int:
    """Get the chain ID the node reports."""
    return hex_to_number(client.request("eth_chainId", []))
