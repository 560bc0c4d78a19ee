"""
Endpoint builders, one module per Horizon resource.

    from stellar_horizon.api import ledgers
    req = ledgers.all().with_cursor("now")
"""

from stellar_horizon.api import (
    accounts,
    effects,
    ledgers,
    offers,
    operations,
    payments,
    root,
    trades,
    transactions,
)

__all__ = [
    "root",
    "accounts",
    "ledgers",
    "transactions",
    "operations",
    "payments",
    "effects",
    "trades",
    "offers",
]
