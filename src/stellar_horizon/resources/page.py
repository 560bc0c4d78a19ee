"""
Paginated collection responses.

Horizon wraps collections in a HAL envelope:
`{"_links": {"self", "next", "prev"}, "_embedded": {"records": [...]}}`.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from stellar_horizon.resources.common import HorizonModel, Link

T = TypeVar("T")


class PageLinks(HorizonModel):
    self_: Link = Field(alias="self")
    next: Link
    previous: Link = Field(alias="prev")


class EmbeddedRecords(BaseModel, Generic[T]):
    model_config = ConfigDict(extra="allow")

    records: list[T]


class Page(HorizonModel, Generic[T]):
    """One page of records."""

    links: PageLinks | None = Field(None, alias="_links")
    embedded: EmbeddedRecords[T] = Field(alias="_embedded")

    @property
    def records(self) -> list[T]:
        return self.embedded.records

    @property
    def next_cursor(self) -> str | None:
        """The paging token of the last record, to request the next page."""
        if not self.records:
            return None
        return getattr(self.records[-1], "paging_token", None)
