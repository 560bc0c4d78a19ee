from __future__ import annotations

from dataclasses import dataclass

from stellar_horizon.api import accounts, ledgers
from stellar_horizon.request import (
    IncludeFailedMixin,
    JoinMixin,
    PageRequest,
    StreamRequest,
)
from stellar_horizon.resources import AnyPayment

API_PATH = "payments"


def all() -> AllPaymentsRequest:  # noqa: A001
    """Creates a request to retrieve (or stream) all payment operations."""
    return AllPaymentsRequest()


def for_account(account_id: str) -> PaymentsForAccountRequest:
    """Creates a request to retrieve payments sent or received by an account."""
    return PaymentsForAccountRequest(account_id=account_id)


def for_ledger(sequence: int) -> PaymentsForLedgerRequest:
    return PaymentsForLedgerRequest(sequence=sequence)


def for_transaction(tx_hash: str) -> PaymentsForTransactionRequest:
    return PaymentsForTransactionRequest(tx_hash=tx_hash)


@dataclass(frozen=True, kw_only=True)
class _PaymentsRequest(IncludeFailedMixin, JoinMixin):
    resource_type = AnyPayment

    def filters(self) -> list[tuple[str, str]]:
        return self._include_failed_params() + self._join_params()


@dataclass(frozen=True, kw_only=True)
class AllPaymentsRequest(_PaymentsRequest, StreamRequest):
    def path(self) -> tuple[str, ...]:
        return (API_PATH,)


@dataclass(frozen=True, kw_only=True)
class PaymentsForAccountRequest(_PaymentsRequest, StreamRequest):
    account_id: str

    def path(self) -> tuple[str, ...]:
        return (accounts.API_PATH, self.account_id, API_PATH)


@dataclass(frozen=True, kw_only=True)
class PaymentsForLedgerRequest(_PaymentsRequest, PageRequest):
    sequence: int

    def path(self) -> tuple[str, ...]:
        return (ledgers.API_PATH, str(self.sequence), API_PATH)


@dataclass(frozen=True, kw_only=True)
class PaymentsForTransactionRequest(_PaymentsRequest, PageRequest):
    tx_hash: str

    def path(self) -> tuple[str, ...]:
        return ("transactions", self.tx_hash, API_PATH)
