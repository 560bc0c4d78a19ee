from __future__ import annotations

from dataclasses import dataclass

from stellar_horizon.api import accounts, ledgers
from stellar_horizon.request import PageRequest, StreamRequest
from stellar_horizon.resources import AnyEffect

API_PATH = "effects"


def all() -> AllEffectsRequest:  # noqa: A001
    """Creates a request to retrieve (or stream) all effects."""
    return AllEffectsRequest()


def for_account(account_id: str) -> EffectsForAccountRequest:
    return EffectsForAccountRequest(account_id=account_id)


def for_ledger(sequence: int) -> EffectsForLedgerRequest:
    return EffectsForLedgerRequest(sequence=sequence)


def for_transaction(tx_hash: str) -> EffectsForTransactionRequest:
    return EffectsForTransactionRequest(tx_hash=tx_hash)


def for_operation(operation_id: str) -> EffectsForOperationRequest:
    return EffectsForOperationRequest(operation_id=operation_id)


def for_liquidity_pool(liquidity_pool_id: str) -> EffectsForLiquidityPoolRequest:
    return EffectsForLiquidityPoolRequest(liquidity_pool_id=liquidity_pool_id)


@dataclass(frozen=True, kw_only=True)
class AllEffectsRequest(StreamRequest):
    resource_type = AnyEffect

    def path(self) -> tuple[str, ...]:
        return (API_PATH,)


@dataclass(frozen=True, kw_only=True)
class EffectsForAccountRequest(StreamRequest):
    resource_type = AnyEffect

    account_id: str

    def path(self) -> tuple[str, ...]:
        return (accounts.API_PATH, self.account_id, API_PATH)


@dataclass(frozen=True, kw_only=True)
class EffectsForLedgerRequest(StreamRequest):
    resource_type = AnyEffect

    sequence: int

    def path(self) -> tuple[str, ...]:
        return (ledgers.API_PATH, str(self.sequence), API_PATH)


@dataclass(frozen=True, kw_only=True)
class EffectsForTransactionRequest(PageRequest):
    resource_type = AnyEffect

    tx_hash: str

    def path(self) -> tuple[str, ...]:
        return ("transactions", self.tx_hash, API_PATH)


@dataclass(frozen=True, kw_only=True)
class EffectsForOperationRequest(PageRequest):
    resource_type = AnyEffect

    operation_id: str

    def path(self) -> tuple[str, ...]:
        return ("operations", self.operation_id, API_PATH)


@dataclass(frozen=True, kw_only=True)
class EffectsForLiquidityPoolRequest(StreamRequest):
    resource_type = AnyEffect

    liquidity_pool_id: str

    def path(self) -> tuple[str, ...]:
        return ("liquidity_pools", self.liquidity_pool_id, API_PATH)
