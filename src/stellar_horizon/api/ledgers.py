from __future__ import annotations

from dataclasses import dataclass

from stellar_horizon.request import Request, StreamRequest
from stellar_horizon.resources import Ledger

API_PATH = "ledgers"


def single(sequence: int) -> SingleLedgerRequest:
    """Creates a request to retrieve a single ledger."""
    return SingleLedgerRequest(sequence=sequence)


def all() -> AllLedgersRequest:  # noqa: A001
    """Creates a request to retrieve (or stream) all ledgers."""
    return AllLedgersRequest()


@dataclass(frozen=True, kw_only=True)
class SingleLedgerRequest(Request):
    response_type = Ledger

    sequence: int

    def path(self) -> tuple[str, ...]:
        return (API_PATH, str(self.sequence))


@dataclass(frozen=True, kw_only=True)
class AllLedgersRequest(StreamRequest):
    resource_type = Ledger

    def path(self) -> tuple[str, ...]:
        return (API_PATH,)
