from __future__ import annotations

from dataclasses import dataclass

from stellar_horizon.api import accounts, ledgers
from stellar_horizon.request import (
    IncludeFailedMixin,
    JoinMixin,
    PageRequest,
    Request,
    StreamRequest,
)
from stellar_horizon.resources import AnyOperation

API_PATH = "operations"


def single(operation_id: str) -> SingleOperationRequest:
    """Creates a request to retrieve a single operation."""
    return SingleOperationRequest(operation_id=operation_id)


def all() -> AllOperationsRequest:  # noqa: A001
    """Creates a request to retrieve (or stream) all operations."""
    return AllOperationsRequest()


def for_account(account_id: str) -> OperationsForAccountRequest:
    """Creates a request to retrieve the account's operations."""
    return OperationsForAccountRequest(account_id=account_id)


def for_ledger(sequence: int) -> OperationsForLedgerRequest:
    """Creates a request to retrieve a ledger's operations."""
    return OperationsForLedgerRequest(sequence=sequence)


def for_transaction(tx_hash: str) -> OperationsForTransactionRequest:
    """Creates a request to retrieve a transaction's operations."""
    return OperationsForTransactionRequest(tx_hash=tx_hash)


def for_claimable_balance(balance_id: str) -> OperationsForClaimableBalanceRequest:
    """Creates a request to retrieve a claimable balance's operations."""
    return OperationsForClaimableBalanceRequest(balance_id=balance_id)


def for_liquidity_pool(liquidity_pool_id: str) -> OperationsForLiquidityPoolRequest:
    """Creates a request to retrieve a liquidity pool's operations."""
    return OperationsForLiquidityPoolRequest(liquidity_pool_id=liquidity_pool_id)


@dataclass(frozen=True, kw_only=True)
class SingleOperationRequest(Request, JoinMixin):
    response_type = AnyOperation

    operation_id: str

    def path(self) -> tuple[str, ...]:
        return (API_PATH, self.operation_id)

    def query(self) -> list[tuple[str, str]]:
        return self._join_params()


@dataclass(frozen=True, kw_only=True)
class _OperationsRequest(IncludeFailedMixin, JoinMixin):
    resource_type = AnyOperation

    def filters(self) -> list[tuple[str, str]]:
        return self._include_failed_params() + self._join_params()


@dataclass(frozen=True, kw_only=True)
class AllOperationsRequest(_OperationsRequest, StreamRequest):
    def path(self) -> tuple[str, ...]:
        return (API_PATH,)


@dataclass(frozen=True, kw_only=True)
class OperationsForAccountRequest(_OperationsRequest, StreamRequest):
    account_id: str

    def path(self) -> tuple[str, ...]:
        return (accounts.API_PATH, self.account_id, API_PATH)


@dataclass(frozen=True, kw_only=True)
class OperationsForLedgerRequest(_OperationsRequest, StreamRequest):
    sequence: int

    def path(self) -> tuple[str, ...]:
        return (ledgers.API_PATH, str(self.sequence), API_PATH)


@dataclass(frozen=True, kw_only=True)
class OperationsForTransactionRequest(_OperationsRequest, PageRequest):
    tx_hash: str

    def path(self) -> tuple[str, ...]:
        return ("transactions", self.tx_hash, API_PATH)


@dataclass(frozen=True, kw_only=True)
class OperationsForClaimableBalanceRequest(_OperationsRequest, StreamRequest):
    balance_id: str

    def path(self) -> tuple[str, ...]:
        return ("claimable_balances", self.balance_id, API_PATH)


@dataclass(frozen=True, kw_only=True)
class OperationsForLiquidityPoolRequest(_OperationsRequest, StreamRequest):
    liquidity_pool_id: str

    def path(self) -> tuple[str, ...]:
        return ("liquidity_pools", self.liquidity_pool_id, API_PATH)
