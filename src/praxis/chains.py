"""
Chains - Chain descriptors and the checks that raise chain errors.

Descriptors are plain frozen dataclasses.  The table below covers the
networks the CLI knows by name; anything else can be built directly with
``Chain(id=..., name=...)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from .errors import (
    chain_does_not_support_contract,
    chain_mismatch,
    chain_not_found,
    invalid_chain_id,
)


MULTICALL3_ADDRESS = "0xca11bde05977b3631167028862be2a173976ca11"


def assert_chain_id(chain_id: object) -> int:
    """Raise an InvalidChainIdError unless chain_id is a positive integer."""
    if isinstance(chain_id, bool) or not isinstance(chain_id, int) or chain_id <= 0:
        raise invalid_chain_id(chain_id=chain_id)
    return chain_id


@dataclass(frozen=True)
class ChainContract:
    """
    A contract deployment on a chain.

    Attributes:
        address: 0x-prefixed contract address
        block_created: First block the contract is available at, if known
    """
    address: str
    block_created: Optional[int] = None


@dataclass(frozen=True)
class Chain:
    id: int
    name: str
    contracts: Mapping[str, ChainContract] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        assert_chain_id(self.id)
        # Read-only view over a private copy.
        object.__setattr__(self, "contracts", MappingProxyType(dict(self.contracts)))


mainnet = Chain(
    id=1,
    name="Ethereum",
    contracts={
        "ensRegistry": ChainContract("0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"),
        "multicall3": ChainContract(MULTICALL3_ADDRESS, block_created=14353601),
    },
)

goerli = Chain(
    id=5,
    name="Goerli",
    contracts={
        "multicall3": ChainContract(MULTICALL3_ADDRESS, block_created=6507670),
    },
)

sepolia = Chain(
    id=11155111,
    name="Sepolia",
    contracts={
        "multicall3": ChainContract(MULTICALL3_ADDRESS, block_created=751532),
    },
)

base_sepolia = Chain(
    id=84532,
    name="Base Sepolia",
    contracts={
        "multicall3": ChainContract(MULTICALL3_ADDRESS, block_created=1059647),
    },
)

foundry = Chain(id=31337, name="Foundry")

hardhat = Chain(id=31337, name="Hardhat")


CHAINS: dict[str, Chain] = {
    "mainnet": mainnet,
    "goerli": goerli,
    "sepolia": sepolia,
    "base-sepolia": base_sepolia,
    "foundry": foundry,
    "hardhat": hardhat,
}


def get_chain(key: Union[str, int]) -> Chain:
    """
    Look up a well-known chain by table key or chain ID.

    Raises:
        KeyError: If no chain matches
    """
    if isinstance(key, str) and not key.isdigit():
        try:
            return CHAINS[key.lower()]
        except KeyError:
            raise KeyError(f"Unknown chain: {key}") from None

    chain_id = int(key)
    for chain in CHAINS.values():
        if chain.id == chain_id:
            return chain
    raise KeyError(f"Unknown chain ID: {chain_id}")


def assert_current_chain(chain: Optional[Chain], current_chain_id: int) -> None:
    """
    Check that the connected chain is the one an operation targets.

    Args:
        chain: Target chain (None if the caller supplied none)
        current_chain_id: Chain ID reported by the node / wallet

    Raises:
        BaseError: ChainNotFoundError if chain is None,
                   ChainMismatchError if the IDs differ
    """
    if chain is None:
        raise chain_not_found()
    if current_chain_id != chain.id:
        raise chain_mismatch(chain=chain, current_chain_id=current_chain_id)


def get_chain_contract_address(
    chain: Chain,
    contract: str,
    block_number: Optional[int] = None,
) -> str:
    """
    Resolve a contract deployment on a chain.

    Args:
        chain: Chain descriptor
        contract: Contract name (e.g., "multicall3")
        block_number: Block being queried, if pinned

    Returns:
        The contract address

    Raises:
        BaseError: ChainDoesNotSupportContract if the chain lacks the
                   contract or it was deployed after block_number
    """
    deployment = chain.contracts.get(contract)
    if deployment is None:
        raise chain_does_not_support_contract(chain=chain, contract=contract)

    if (
        block_number is not None
        and deployment.block_created is not None
        and deployment.block_created > block_number
    ):
        raise chain_does_not_support_contract(
            chain=chain, contract=contract, block_number=block_number
        )

    return deployment.address
