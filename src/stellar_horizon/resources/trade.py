from __future__ import annotations

from datetime import datetime

from pydantic import Field

from stellar_horizon.resources.common import Asset, HorizonModel, Links, StrInt


class TradePrice(HorizonModel):
    numerator: StrInt = Field(alias="n")
    denominator: StrInt = Field(alias="d")


class Trade(HorizonModel):
    """A trade between two offers or an offer and a liquidity pool."""

    links: Links | None = Field(None, alias="_links")
    id: str
    paging_token: str
    ledger_close_time: datetime
    offer_id: str | None = None
    trade_type: str
    liquidity_pool_fee_bp: int | None = None
    base_liquidity_pool_id: str | None = None
    base_offer_id: str | None = None
    base_account: str | None = None
    base_amount: str
    base_asset_type: str
    base_asset_code: str | None = None
    base_asset_issuer: str | None = None
    counter_liquidity_pool_id: str | None = None
    counter_offer_id: str | None = None
    counter_account: str | None = None
    counter_amount: str
    counter_asset_type: str
    counter_asset_code: str | None = None
    counter_asset_issuer: str | None = None
    base_is_seller: bool
    price: TradePrice | None = None

    @property
    def base_asset(self) -> Asset:
        return Asset(
            asset_type=self.base_asset_type,
            asset_code=self.base_asset_code,
            asset_issuer=self.base_asset_issuer,
        )

    @property
    def counter_asset(self) -> Asset:
        return Asset(
            asset_type=self.counter_asset_type,
            asset_code=self.counter_asset_code,
            asset_issuer=self.counter_asset_issuer,
        )
