from __future__ import annotations

from dataclasses import dataclass

from stellar_horizon.api import accounts
from stellar_horizon.request import PageRequest, StreamRequest
from stellar_horizon.resources import Trade

API_PATH = "trades"


def all() -> AllTradesRequest:  # noqa: A001
    """Creates a request to retrieve (or stream) all trades."""
    return AllTradesRequest()


def for_account(account_id: str) -> TradesForAccountRequest:
    return TradesForAccountRequest(account_id=account_id)


def for_offer(offer_id: int) -> TradesForOfferRequest:
    return TradesForOfferRequest(offer_id=offer_id)


def for_liquidity_pool(liquidity_pool_id: str) -> TradesForLiquidityPoolRequest:
    return TradesForLiquidityPoolRequest(liquidity_pool_id=liquidity_pool_id)


@dataclass(frozen=True, kw_only=True)
class AllTradesRequest(StreamRequest):
    resource_type = Trade

    def path(self) -> tuple[str, ...]:
        return (API_PATH,)


@dataclass(frozen=True, kw_only=True)
class TradesForAccountRequest(StreamRequest):
    resource_type = Trade

    account_id: str

    def path(self) -> tuple[str, ...]:
        return (accounts.API_PATH, self.account_id, API_PATH)


@dataclass(frozen=True, kw_only=True)
class TradesForOfferRequest(PageRequest):
    resource_type = Trade

    offer_id: int

    def path(self) -> tuple[str, ...]:
        return ("offers", str(self.offer_id), API_PATH)


@dataclass(frozen=True, kw_only=True)
class TradesForLiquidityPoolRequest(StreamRequest):
    resource_type = Trade

    liquidity_pool_id: str

    def path(self) -> tuple[str, ...]:
        return ("liquidity_pools", self.liquidity_pool_id, API_PATH)
