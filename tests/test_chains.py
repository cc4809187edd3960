"""Unit tests for chain descriptors and chain checks."""

from __future__ import annotations

import pytest

from praxis.chains import (
    MULTICALL3_ADDRESS,
    Chain,
    ChainContract,
    assert_chain_id,
    assert_current_chain,
    get_chain,
    get_chain_contract_address,
    goerli,
    mainnet,
    sepolia,
)
from praxis.errors import BaseError, ErrorKind


class TestChainTable:
    def test_lookup_by_name(self) -> None:
        assert get_chain("sepolia") is sepolia
        assert get_chain("Mainnet") is mainnet

    def test_lookup_by_id(self) -> None:
        assert get_chain(5) is goerli
        assert get_chain("11155111") is sepolia

    def test_unknown(self) -> None:
        with pytest.raises(KeyError):
            get_chain("nowhere")
        with pytest.raises(KeyError):
            get_chain(999999)

    def test_chain_validates_id(self) -> None:
        with pytest.raises(BaseError) as exc_info:
            Chain(id=0, name="Broken")
        assert exc_info.value.kind is ErrorKind.INVALID_CHAIN_ID

    def test_chain_is_hashable(self) -> None:
        assert hash(mainnet) == hash(mainnet)
        assert {mainnet, sepolia, mainnet} == {mainnet, sepolia}

    def test_contracts_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            mainnet.contracts["ensRegistry"] = ChainContract("0x0")  # type: ignore[index]
        assert mainnet.contracts["ensRegistry"].address.startswith("0x00000000000C2E")

    def test_contracts_copied_from_caller(self) -> None:
        contracts = {"multicall3": ChainContract(MULTICALL3_ADDRESS)}
        chain = Chain(id=31337, name="Local", contracts=contracts)
        contracts["multicall3"] = ChainContract("0x0")
        assert chain.contracts["multicall3"].address == MULTICALL3_ADDRESS


class TestAssertChainId:
    def test_accepts_positive(self) -> None:
        assert assert_chain_id(1) == 1
        assert assert_chain_id(84532) == 84532

    @pytest.mark.parametrize("chain_id", [0, -1, True, "1", 1.0, None])
    def test_rejects_invalid(self, chain_id: object) -> None:
        with pytest.raises(BaseError) as exc_info:
            assert_chain_id(chain_id)
        assert exc_info.value.kind is ErrorKind.INVALID_CHAIN_ID
        assert exc_info.value.short_message == f'Chain ID "{chain_id}" is invalid.'


class TestAssertCurrentChain:
    def test_matching(self) -> None:
        assert_current_chain(goerli, 5)

    def test_no_chain(self) -> None:
        with pytest.raises(BaseError) as exc_info:
            assert_current_chain(None, 1)
        assert exc_info.value.kind is ErrorKind.CHAIN_NOT_FOUND

    def test_mismatch(self) -> None:
        with pytest.raises(BaseError) as exc_info:
            assert_current_chain(goerli, 1)
        err = exc_info.value
        assert err.kind is ErrorKind.CHAIN_MISMATCH
        assert err.meta_messages == ("Current Chain ID:  1", "Expected Chain ID: 5 – Goerli")


class TestGetChainContractAddress:
    @pytest.fixture()
    def chain(self) -> Chain:
        return Chain(
            id=10,
            name="Testnet",
            contracts={"multicall3": ChainContract(MULTICALL3_ADDRESS, block_created=100)},
        )

    def test_resolves_address(self, chain: Chain) -> None:
        assert get_chain_contract_address(chain, "multicall3") == MULTICALL3_ADDRESS
        assert get_chain_contract_address(chain, "multicall3", block_number=100) == MULTICALL3_ADDRESS

    def test_missing_contract(self, chain: Chain) -> None:
        with pytest.raises(BaseError) as exc_info:
            get_chain_contract_address(chain, "ensRegistry")
        err = exc_info.value
        assert err.kind is ErrorKind.CHAIN_DOES_NOT_SUPPORT_CONTRACT
        assert err.meta_messages[1] == '- The chain does not have the contract "ensRegistry" configured.'

    def test_not_yet_deployed(self, chain: Chain) -> None:
        with pytest.raises(BaseError) as exc_info:
            get_chain_contract_address(chain, "multicall3", block_number=50)
        err = exc_info.value
        assert err.kind is ErrorKind.CHAIN_DOES_NOT_SUPPORT_CONTRACT
        assert err.meta_messages[1] == (
            '- The contract "multicall3" was not deployed until block 100 (current block 50).'
        )
