"""
Request types.

A request is an immutable value that knows how to build its endpoint URL
from a Horizon host. Builder methods return a modified copy.

- `Request`: one endpoint, decoded into `response_type`
- `PageRequest`: a paginated collection of `resource_type` records, with
  `cursor`, `limit` and `order`
- `StreamRequest`: a collection that can also be streamed over SSE
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, TypeVar

from stellar_horizon._types import (
    CURSOR_QUERY_PARAM,
    LIMIT_QUERY_PARAM,
    ORDER_QUERY_PARAM,
    Join,
    Order,
)
from stellar_horizon._util import append_query_params, join_url
from stellar_horizon.resources.page import Page

R = TypeVar("R", bound="Request")


@dataclass(frozen=True, kw_only=True)
class Request:
    """Base class for all Horizon requests."""

    response_type: ClassVar[Any]

    def path(self) -> tuple[str, ...]:
        """Path segments appended to the host."""
        raise NotImplementedError

    def query(self) -> list[tuple[str, str]]:
        """Ordered query parameters."""
        return []

    def uri(self, host: str) -> str:
        """
        Build the endpoint URL.

        Segments are appended to any path prefix already on the host.

        Args:
            host: Validated Horizon base URL

        Returns:
            The absolute endpoint URL
        """
        url = join_url(host, *self.path())
        params = self.query()
        if params:
            url = append_query_params(url, params)
        return url


@dataclass(frozen=True, kw_only=True)
class PageRequest(Request):
    """A request for a page of records."""

    resource_type: ClassVar[Any]

    cursor: str | None = None
    limit: int | None = None
    order: Order | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        resource_type = getattr(cls, "resource_type", None)
        if resource_type is not None and "response_type" not in cls.__dict__:
            cls.response_type = Page[resource_type]

    def with_cursor(self: R, cursor: str) -> R:
        return replace(self, cursor=cursor)  # type: ignore[type-var]

    def with_limit(self: R, limit: int) -> R:
        return replace(self, limit=limit)  # type: ignore[type-var]

    def with_order(self: R, order: Order) -> R:
        if order not in ("asc", "desc"):
            raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")
        return replace(self, order=order)  # type: ignore[type-var]

    def filters(self) -> list[tuple[str, str]]:
        """Resource-specific query parameters, in a stable order."""
        return []

    def query(self) -> list[tuple[str, str]]:
        params = self.filters()
        if self.cursor is not None:
            params.append((CURSOR_QUERY_PARAM, self.cursor))
        if self.limit is not None:
            params.append((LIMIT_QUERY_PARAM, str(self.limit)))
        if self.order is not None:
            params.append((ORDER_QUERY_PARAM, self.order))
        return params


@dataclass(frozen=True, kw_only=True)
class StreamRequest(PageRequest):
    """Marker for collections Horizon can stream as server-sent events."""


@dataclass(frozen=True, kw_only=True)
class IncludeFailedMixin:
    include_failed: bool | None = None

    def with_include_failed(self: R, include_failed: bool = True) -> R:
        return replace(self, include_failed=include_failed)  # type: ignore[type-var]

    def _include_failed_params(self) -> list[tuple[str, str]]:
        if self.include_failed is None:
            return []
        return [("include_failed", "true" if self.include_failed else "false")]


@dataclass(frozen=True, kw_only=True)
class JoinMixin:
    join: Join | None = None

    def with_join(self: R, join: Join = "transactions") -> R:
        return replace(self, join=join)  # type: ignore[type-var]

    def _join_params(self) -> list[tuple[str, str]]:
        if self.join is None:
            return []
        return [("join", self.join)]
