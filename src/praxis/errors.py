"""
Errors - Structured chain / configuration errors.

Every domain error is a ``BaseError``: a stable ``kind`` tag, a short
message rendered at construction, supplementary meta lines, and an
optional cause.  Kinds are data, not subclasses, so callers branch on
``err.kind``:

    try:
        assert_current_chain(chain, current_chain_id)
    except BaseError as exc:
        if exc.kind is ErrorKind.CHAIN_MISMATCH:
            ...

Transport failures are never wrapped in these; see ``pneuma.rpc``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable, Optional

if TYPE_CHECKING:
    from .chains import Chain


class ErrorKind(str, Enum):
    CHAIN_DOES_NOT_SUPPORT_CONTRACT = "ChainDoesNotSupportContract"
    CHAIN_MISMATCH = "ChainMismatchError"
    CHAIN_NOT_FOUND = "ChainNotFoundError"
    INVALID_CHAIN_ID = "InvalidChainIdError"


class BaseError(Exception):
    """Immutable, context-carrying domain error.

    Attributes:
        kind: Stable tag identifying the error for programmatic matching
        short_message: Primary message, fully rendered
        meta_messages: Ordered diagnostic lines shown after the message
        cause: Wrapped causal error, if any
    """

    def __init__(
        self,
        kind: ErrorKind,
        short_message: str,
        meta_messages: Iterable[str] = (),
        cause: Optional[BaseException] = None,
    ) -> None:
        self._kind = ErrorKind(kind)
        self._short_message = short_message
        self._meta_messages = tuple(meta_messages)
        self._cause = cause
        super().__init__(self._render())
        if cause is not None:
            self.__cause__ = cause

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._kind.value

    @property
    def short_message(self) -> str:
        return self._short_message

    @property
    def meta_messages(self) -> tuple[str, ...]:
        return self._meta_messages

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def details(self) -> Optional[str]:
        if self._cause is None:
            return None
        return str(self._cause)

    @property
    def message(self) -> str:
        return str(self)

    def walk(
        self, predicate: Optional[Callable[[BaseException], bool]] = None
    ) -> Optional[BaseException]:
        """
        Follow the cause chain.

        Args:
            predicate: Stop at the first error for which this returns True

        Returns:
            The first matching error, or the deepest error when no
            predicate is given.  None if a predicate matches nothing.
        """
        err: Optional[BaseException] = self
        deepest: BaseException = self
        while err is not None:
            if predicate is not None and predicate(err):
                return err
            deepest = err
            if isinstance(err, BaseError):
                err = err.cause
            else:
                err = err.__cause__
        return None if predicate is not None else deepest

    def _render(self) -> str:
        parts = [self._short_message]
        if self._meta_messages:
            parts.append("\n".join(self._meta_messages))
        if self._cause is not None:
            parts.append(f"Details: {self._cause}")
        return "\n\n".join(parts)

    def __repr__(self) -> str:
        return f"BaseError(kind={self._kind.value!r}, short_message={self._short_message!r})"


# ============ Chain Errors ============


def chain_does_not_support_contract(
    *,
    chain: "Chain",
    contract: str,
    block_number: Optional[int] = None,
) -> BaseError:
    deployment = chain.contracts.get(contract)
    block_created = deployment.block_created if deployment is not None else None

    if (
        block_number is not None
        and block_created is not None
        and block_created > block_number
    ):
        reason = (
            f'- The contract "{contract}" was not deployed until block '
            f"{block_created} (current block {block_number})."
        )
    else:
        reason = f'- The chain does not have the contract "{contract}" configured.'

    return BaseError(
        ErrorKind.CHAIN_DOES_NOT_SUPPORT_CONTRACT,
        f'Chain "{chain.name}" does not support contract "{contract}".',
        meta_messages=["This could be due to any of the following:", reason],
    )


def chain_mismatch(*, chain: "Chain", current_chain_id: int) -> BaseError:
    return BaseError(
        ErrorKind.CHAIN_MISMATCH,
        f"The current chain of the wallet (id: {current_chain_id}) does not match "
        f"the target chain for the transaction (id: {chain.id} – {chain.name}).",
        meta_messages=[
            f"Current Chain ID:  {current_chain_id}",
            f"Expected Chain ID: {chain.id} – {chain.name}",
        ],
    )


def chain_not_found() -> BaseError:
    return BaseError(
        ErrorKind.CHAIN_NOT_FOUND,
        "\n".join(
            [
                "No chain was provided to the request.",
                "Please provide a chain with the `chain` argument on the Action, "
                "or by supplying a `chain` to WalletClient.",
            ]
        ),
    )


def invalid_chain_id(*, chain_id: object) -> BaseError:
    return BaseError(ErrorKind.INVALID_CHAIN_ID, f'Chain ID "{chain_id}" is invalid.')


__all__ = [
    "BaseError",
    "ErrorKind",
    "chain_does_not_support_contract",
    "chain_mismatch",
    "chain_not_found",
    "invalid_chain_id",
]
