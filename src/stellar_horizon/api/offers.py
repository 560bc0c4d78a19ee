from __future__ import annotations

from dataclasses import dataclass

from stellar_horizon.api import accounts
from stellar_horizon.request import PageRequest, Request
from stellar_horizon.resources import Offer

API_PATH = "offers"


def single(offer_id: int) -> SingleOfferRequest:
    """Creates a request to retrieve a single offer."""
    return SingleOfferRequest(offer_id=offer_id)


def all() -> AllOffersRequest:  # noqa: A001
    """Creates a request to retrieve all open offers."""
    return AllOffersRequest()


def for_account(account_id: str) -> OffersForAccountRequest:
    return OffersForAccountRequest(account_id=account_id)


@dataclass(frozen=True, kw_only=True)
class SingleOfferRequest(Request):
    response_type = Offer

    offer_id: int

    def path(self) -> tuple[str, ...]:
        return (API_PATH, str(self.offer_id))


@dataclass(frozen=True, kw_only=True)
class AllOffersRequest(PageRequest):
    resource_type = Offer

    def path(self) -> tuple[str, ...]:
        return (API_PATH,)


@dataclass(frozen=True, kw_only=True)
class OffersForAccountRequest(PageRequest):
    resource_type = Offer

    account_id: str

    def path(self) -> tuple[str, ...]:
        return (accounts.API_PATH, self.account_id, API_PATH)
