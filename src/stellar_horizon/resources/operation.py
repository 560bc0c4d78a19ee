"""
Operation resources.

Horizon tags every operation with a `type` field. The operation types this
client models explicitly are parsed into their own class; any other type is
parsed into the generic `Operation`, with its type-specific fields kept as
extra fields.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag

from stellar_horizon.resources.common import Asset, HorizonModel, Links
from stellar_horizon.resources.transaction import Transaction


class Operation(HorizonModel):
    """Fields shared by every operation."""

    links: Links | None = Field(None, alias="_links")
    id: str
    paging_token: str
    transaction_successful: bool
    source_account: str
    source_account_muxed: str | None = None
    source_account_muxed_id: str | None = None
    type: str
    type_i: int
    created_at: datetime
    transaction_hash: str
    transaction: Transaction | None = None
    sponsor: str | None = None


class CreateAccountOperation(Operation):
    starting_balance: str
    funder: str
    funder_muxed: str | None = None
    funder_muxed_id: str | None = None
    account: str


class PaymentOperation(Operation):
    asset_type: str
    asset_code: str | None = None
    asset_issuer: str | None = None
    from_: str = Field(alias="from")
    from_muxed: str | None = None
    from_muxed_id: str | None = None
    to: str
    to_muxed: str | None = None
    to_muxed_id: str | None = None
    amount: str

    @property
    def asset(self) -> Asset:
        return Asset(
            asset_type=self.asset_type,
            asset_code=self.asset_code,
            asset_issuer=self.asset_issuer,
        )


class PathPaymentStrictReceiveOperation(PaymentOperation):
    path: list[Asset]
    source_amount: str
    source_max: str
    source_asset_type: str
    source_asset_code: str | None = None
    source_asset_issuer: str | None = None


class PathPaymentStrictSendOperation(PaymentOperation):
    path: list[Asset]
    source_amount: str
    destination_min: str
    source_asset_type: str
    source_asset_code: str | None = None
    source_asset_issuer: str | None = None


class AccountMergeOperation(Operation):
    account: str
    account_muxed: str | None = None
    account_muxed_id: str | None = None
    into: str
    into_muxed: str | None = None
    into_muxed_id: str | None = None


class ManageDataOperation(Operation):
    name: str
    value: str | None = None


class BumpSequenceOperation(Operation):
    bump_to: str


class ChangeTrustOperation(Operation):
    asset_type: str
    asset_code: str | None = None
    asset_issuer: str | None = None
    limit: str | None = None
    trustee: str | None = None
    trustor: str


def _operation_tag(types: frozenset[str]) -> Any:
    def tag(value: Any) -> str:
        if isinstance(value, dict):
            op_type = value.get("type")
        else:
            op_type = getattr(value, "type", None)
        return op_type if op_type in types else "other"

    return tag


_OPERATION_TYPES = frozenset(
    {
        "create_account",
        "payment",
        "path_payment_strict_receive",
        "path_payment_strict_send",
        "account_merge",
        "manage_data",
        "bump_sequence",
        "change_trust",
    }
)

_PAYMENT_TYPES = frozenset(
    {
        "create_account",
        "payment",
        "path_payment_strict_receive",
        "path_payment_strict_send",
        "account_merge",
    }
)

AnyOperation = Annotated[
    Union[
        Annotated[CreateAccountOperation, Tag("create_account")],
        Annotated[PaymentOperation, Tag("payment")],
        Annotated[PathPaymentStrictReceiveOperation, Tag("path_payment_strict_receive")],
        Annotated[PathPaymentStrictSendOperation, Tag("path_payment_strict_send")],
        Annotated[AccountMergeOperation, Tag("account_merge")],
        Annotated[ManageDataOperation, Tag("manage_data")],
        Annotated[BumpSequenceOperation, Tag("bump_sequence")],
        Annotated[ChangeTrustOperation, Tag("change_trust")],
        Annotated[Operation, Tag("other")],
    ],
    Discriminator(_operation_tag(_OPERATION_TYPES)),
]

# Records of the payments endpoints; invoke_host_function payments are "other"
AnyPayment = Annotated[
    Union[
        Annotated[CreateAccountOperation, Tag("create_account")],
        Annotated[PaymentOperation, Tag("payment")],
        Annotated[PathPaymentStrictReceiveOperation, Tag("path_payment_strict_receive")],
        Annotated[PathPaymentStrictSendOperation, Tag("path_payment_strict_send")],
        Annotated[AccountMergeOperation, Tag("account_merge")],
        Annotated[Operation, Tag("other")],
    ],
    Discriminator(_operation_tag(_PAYMENT_TYPES)),
]
