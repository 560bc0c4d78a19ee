from __future__ import annotations

from datetime import datetime

from pydantic import Field

from stellar_horizon.resources.common import Asset, HorizonModel, Links, Price, StrInt


class Offer(HorizonModel):
    """An open offer on the decentralized exchange."""

    links: Links | None = Field(None, alias="_links")
    id: StrInt
    paging_token: str
    seller: str
    selling: Asset
    buying: Asset
    amount: str
    price_ratio: Price = Field(alias="price_r")
    price: str
    sponsor: str | None = None
    last_modified_ledger: int
    last_modified_time: datetime | None = None
