"""
Horizon resources.

Models mirror Horizon's JSON documents; `to_dict()`/`to_json()` serialize them
back using Horizon's field names.
"""

from stellar_horizon.resources.account import (
    Account,
    AccountFlags,
    AccountThresholds,
    Balance,
    Signer,
)
from stellar_horizon.resources.common import Asset, HorizonModel, Link, Price
from stellar_horizon.resources.effect import (
    AccountCreatedEffect,
    AccountCreditedEffect,
    AccountDebitedEffect,
    AnyEffect,
    Effect,
    SequenceBumpedEffect,
    TradeEffect,
)
from stellar_horizon.resources.ledger import Ledger
from stellar_horizon.resources.offer import Offer
from stellar_horizon.resources.operation import (
    AccountMergeOperation,
    AnyOperation,
    AnyPayment,
    BumpSequenceOperation,
    ChangeTrustOperation,
    CreateAccountOperation,
    ManageDataOperation,
    Operation,
    PathPaymentStrictReceiveOperation,
    PathPaymentStrictSendOperation,
    PaymentOperation,
)
from stellar_horizon.resources.page import Page, PageLinks
from stellar_horizon.resources.problem import HorizonProblem
from stellar_horizon.resources.root import Root
from stellar_horizon.resources.trade import Trade, TradePrice
from stellar_horizon.resources.transaction import (
    FeeBumpTransaction,
    InnerTransaction,
    Transaction,
)

__all__ = [
    # Base
    "HorizonModel",
    "Link",
    "Asset",
    "Price",
    "Page",
    "PageLinks",
    "HorizonProblem",
    # Resources
    "Root",
    "Account",
    "AccountFlags",
    "AccountThresholds",
    "Balance",
    "Signer",
    "Ledger",
    "Transaction",
    "FeeBumpTransaction",
    "InnerTransaction",
    "Operation",
    "AnyOperation",
    "AnyPayment",
    "CreateAccountOperation",
    "PaymentOperation",
    "PathPaymentStrictReceiveOperation",
    "PathPaymentStrictSendOperation",
    "AccountMergeOperation",
    "ManageDataOperation",
    "BumpSequenceOperation",
    "ChangeTrustOperation",
    "Effect",
    "AnyEffect",
    "AccountCreatedEffect",
    "AccountCreditedEffect",
    "AccountDebitedEffect",
    "TradeEffect",
    "SequenceBumpedEffect",
    "Trade",
    "TradePrice",
    "Offer",
]
