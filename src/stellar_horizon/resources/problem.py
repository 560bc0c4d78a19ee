from __future__ import annotations

from typing import Any

from stellar_horizon.resources.common import HorizonModel


class HorizonProblem(HorizonModel):
    """
    Horizon's error document (RFC 7807 problem details).

    Returned in the body of 4xx responses on the one-shot request path.
    """

    type: str | None = None
    title: str
    status: int
    detail: str | None = None
    extras: dict[str, Any] | None = None
