from __future__ import annotations

from pydantic import Field

from stellar_horizon.resources.common import HorizonModel, Links


class Root(HorizonModel):
    """Horizon server and network information."""

    links: Links | None = Field(None, alias="_links")
    horizon_version: str
    core_version: str
    ingest_latest_ledger: int
    history_latest_ledger: int
    history_elder_ledger: int
    core_latest_ledger: int
    network_passphrase: str
    current_protocol_version: int
    core_supported_protocol_version: int
