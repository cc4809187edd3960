"""
Actions - Typed operations over a client handle.

Public actions read chain state; test actions mutate a development node
through its mode-prefixed methods.
"""

from .public import (
    BLOCK_TAGS,
    BlockSelector,
    get_balance,
    get_block_number,
    get_chain_id,
    get_transaction_count,
)
from .testing import (
    impersonate_account,
    request_with_mode,
    set_balance,
    set_nonce,
    stop_impersonating_account,
)

__all__ = [
    "BLOCK_TAGS",
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
