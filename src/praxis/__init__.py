__all__ = [
    # Hex codec
    "hex_to_number",
    "number_to_hex",
    # Errors
    "BaseError",
    "ErrorKind",
    "chain_does_not_support_contract",
    "chain_mismatch",
    "chain_not_found",
    "invalid_chain_id",
    # Chains
    "Chain",
    "ChainContract",
    "assert_chain_id",
    "assert_current_chain",
    "get_chain",
    "get_chain_contract_address",
    # Clients
    "Client",
    "TestClient",
    "HttpTransport",
    "TransportError",
    "HttpRequestError",
    "RpcResponseError",
    "create_public_client",
    "create_test_client",
    # Actions
    "BlockSelector",
    "get_balance",
    "get_block_number",
    "get_chain_id",
    "get_transaction_count",
    "impersonate_account",
    "request_with_mode",
    "set_balance",
    "set_nonce",
    "stop_impersonating_account",
]

from .utils import hex_to_number, number_to_hex
from .errors import (
    BaseError,
    ErrorKind,
    chain_does_not_support_contract,
    chain_mismatch,
    chain_not_found,
    invalid_chain_id,
)
from .chains import (
    Chain,
    ChainContract,
    assert_chain_id,
    assert_current_chain,
    get_chain,
    get_chain_contract_address,
)
from .pneuma.client import Client, TestClient, create_public_client, create_test_client
from .pneuma.rpc import HttpRequestError, HttpTransport, RpcResponseError, TransportError
from .actions.public import (
    BlockSelector,
    get_balance,
    get_block_number,
    get_chain_id,
    get_transaction_count,
)
from .actions.testing import (
    impersonate_account,
    request_with_mode,
    set_balance,
    set_nonce,
    stop_impersonating_account,
)
