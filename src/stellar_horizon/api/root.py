from __future__ import annotations

from dataclasses import dataclass

from stellar_horizon.request import Request
from stellar_horizon.resources import Root


def root() -> RootRequest:
    """Creates a request to retrieve the Horizon root document."""
    return RootRequest()


@dataclass(frozen=True, kw_only=True)
class RootRequest(Request):
    response_type = Root

    def path(self) -> tuple[str, ...]:
        return ()
