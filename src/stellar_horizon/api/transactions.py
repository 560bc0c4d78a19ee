from __future__ import annotations

from dataclasses import dataclass

from stellar_horizon.api import accounts, ledgers
from stellar_horizon.request import IncludeFailedMixin, Request, StreamRequest
from stellar_horizon.resources import Transaction

API_PATH = "transactions"


def single(tx_hash: str) -> SingleTransactionRequest:
    """Creates a request to retrieve a single transaction."""
    return SingleTransactionRequest(tx_hash=tx_hash)


def all() -> AllTransactionsRequest:  # noqa: A001
    """Creates a request to retrieve (or stream) all transactions."""
    return AllTransactionsRequest()


def for_account(account_id: str) -> TransactionsForAccountRequest:
    """Creates a request to retrieve the account's transactions."""
    return TransactionsForAccountRequest(account_id=account_id)


def for_ledger(sequence: int) -> TransactionsForLedgerRequest:
    """Creates a request to retrieve a ledger's transactions."""
    return TransactionsForLedgerRequest(sequence=sequence)


@dataclass(frozen=True, kw_only=True)
class SingleTransactionRequest(Request):
    response_type = Transaction

    tx_hash: str

    def path(self) -> tuple[str, ...]:
        return (API_PATH, self.tx_hash)


@dataclass(frozen=True, kw_only=True)
class AllTransactionsRequest(StreamRequest, IncludeFailedMixin):
    resource_type = Transaction

    def path(self) -> tuple[str, ...]:
        return (API_PATH,)

    def filters(self) -> list[tuple[str, str]]:
        return self._include_failed_params()


@dataclass(frozen=True, kw_only=True)
class TransactionsForAccountRequest(StreamRequest, IncludeFailedMixin):
    resource_type = Transaction

    account_id: str

    def path(self) -> tuple[str, ...]:
        return (accounts.API_PATH, self.account_id, API_PATH)

    def filters(self) -> list[tuple[str, str]]:
        return self._include_failed_params()


@dataclass(frozen=True, kw_only=True)
class TransactionsForLedgerRequest(StreamRequest, IncludeFailedMixin):
    resource_type = Transaction

    sequence: int

    def path(self) -> tuple[str, ...]:
        return (ledgers.API_PATH, str(self.sequence), API_PATH)

    def filters(self) -> list[tuple[str, str]]:
        return self._include_failed_params()
