from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag

from stellar_horizon.resources.common import HorizonModel, Links


class Effect(HorizonModel):
    """Fields shared by every effect; type-specific fields are kept as extras."""

    links: Links | None = Field(None, alias="_links")
    id: str
    paging_token: str
    account: str
    type: str
    type_i: int
    created_at: datetime


class AccountCreatedEffect(Effect):
    starting_balance: str


class AccountCreditedEffect(Effect):
    amount: str
    asset_type: str
    asset_code: str | None = None
    asset_issuer: str | None = None


class AccountDebitedEffect(Effect):
    amount: str
    asset_type: str
    asset_code: str | None = None
    asset_issuer: str | None = None


class TradeEffect(Effect):
    seller: str
    offer_id: str
    sold_amount: str
    sold_asset_type: str
    sold_asset_code: str | None = None
    sold_asset_issuer: str | None = None
    bought_amount: str
    bought_asset_type: str
    bought_asset_code: str | None = None
    bought_asset_issuer: str | None = None


class SequenceBumpedEffect(Effect):
    new_seq: str


_EFFECT_TYPES = frozenset(
    {"account_created", "account_credited", "account_debited", "trade", "sequence_bumped"}
)


def _effect_tag(value: Any) -> str:
    if isinstance(value, dict):
        effect_type = value.get("type")
    else:
        effect_type = getattr(value, "type", None)
    return effect_type if effect_type in _EFFECT_TYPES else "other"


AnyEffect = Annotated[
    Union[
        Annotated[AccountCreatedEffect, Tag("account_created")],
        Annotated[AccountCreditedEffect, Tag("account_credited")],
        Annotated[AccountDebitedEffect, Tag("account_debited")],
        Annotated[TradeEffect, Tag("trade")],
        Annotated[SequenceBumpedEffect, Tag("sequence_bumped")],
        Annotated[Effect, Tag("other")],
    ],
    Discriminator(_effect_tag),
]
