from __future__ import annotations

from dataclasses import dataclass, replace

from stellar_horizon.request import PageRequest, Request
from stellar_horizon.resources import Account, Asset

API_PATH = "accounts"


def single(account_id: str) -> SingleAccountRequest:
    """Creates a request to retrieve a single account."""
    return SingleAccountRequest(account_id=account_id)


def all() -> AllAccountsRequest:  # noqa: A001
    """Creates a request to retrieve accounts filtered by signer, asset or sponsor."""
    return AllAccountsRequest()


@dataclass(frozen=True, kw_only=True)
class SingleAccountRequest(Request):
    response_type = Account

    account_id: str

    def path(self) -> tuple[str, ...]:
        return (API_PATH, self.account_id)


@dataclass(frozen=True, kw_only=True)
class AllAccountsRequest(PageRequest):
    resource_type = Account

    signer: str | None = None
    asset: Asset | None = None
    sponsor: str | None = None

    def with_signer(self, signer: str) -> AllAccountsRequest:
        return replace(self, signer=signer)

    def with_trusted_asset(self, asset: Asset) -> AllAccountsRequest:
        if asset.is_native:
            raise ValueError("accounts can only be filtered by a credit asset")
        return replace(self, asset=asset)

    def with_sponsor(self, sponsor: str) -> AllAccountsRequest:
        return replace(self, sponsor=sponsor)

    def path(self) -> tuple[str, ...]:
        return (API_PATH,)

    def filters(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.signer is not None:
            params.append(("signer", self.signer))
        if self.asset is not None:
            params.append(("asset", self.asset.canonical()))
        if self.sponsor is not None:
            params.append(("sponsor", self.sponsor))
        return params
