"""
Pytest configuration and shared fakes for stellar-horizon tests.

The fakes stand in for httpx responses so streams can be driven chunk by
chunk without a server.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterator
from unittest.mock import MagicMock

import httpx
import pytest

HOST = "https://horizon.example.org"


class MockResponse:
    """Mock streaming httpx.Response for testing."""

    def __init__(
        self,
        chunks: list[bytes | str] | bytes | str = b"",
        *,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        error: Exception | None = None,
    ):
        if not isinstance(chunks, list):
            chunks = [chunks]
        self._chunks = [c.encode("utf-8") if isinstance(c, str) else c for c in chunks]
        self._error = error
        self.status_code = status_code
        self.headers = httpx.Headers(headers or {})
        self.is_success = 200 <= status_code < 300
        self.reads = 0
        self.close_count = 0

    def iter_bytes(self, _chunk_size: int = 1024) -> Iterator[bytes]:
        for chunk in self._chunks:
            self.reads += 1
            yield chunk
        if self._error is not None:
            raise self._error

    def close(self) -> None:
        self.close_count += 1


class MockAsyncResponse(MockResponse):
    """Mock streaming httpx.Response for async testing."""

    async def aiter_bytes(self, _chunk_size: int = 1024) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            self.reads += 1
            yield chunk
        if self._error is not None:
            raise self._error

    async def aclose(self) -> None:
        self.close_count += 1


def setup_mock_client(*responses: MockResponse | Exception) -> MagicMock:
    """Set up a mock httpx.Client that uses the streaming API."""
    mock_client = MagicMock(spec=httpx.Client)
    mock_client.build_request.return_value = MagicMock()
    mock_client.send.side_effect = list(responses)
    return mock_client


def get_request_url(mock_client: MagicMock, call_index: int = 0) -> str:
    """Extract URL from the captured build_request call."""
    return str(mock_client.build_request.call_args_list[call_index][0][1])


def get_request_headers(mock_client: MagicMock, call_index: int = 0) -> dict:
    """Extract headers from the captured build_request call."""
    return dict(mock_client.build_request.call_args_list[call_index][1]["headers"])


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


LEDGER = {
    "_links": {
        "self": {"href": "https://horizon.example.org/ledgers/888"},
        "transactions": {
            "href": "https://horizon.example.org/ledgers/888/transactions{?cursor,limit,order}",
            "templated": True,
        },
    },
    "id": "8ff7bbaa5a0d1b5d8d6a2a0e8b8f0c3d6d7f0b1d2b7c8d5d0e8f7a6b5c4d3e2f1",
    "paging_token": "3813930133831680",
    "hash": "8ff7bbaa5a0d1b5d8d6a2a0e8b8f0c3d6d7f0b1d2b7c8d5d0e8f7a6b5c4d3e2f1",
    "prev_hash": "0b8c1a6e1d3f5b7a9c2e4d6f8a0b2c4e6d8f0a2b4c6e8d0f2a4b6c8e0d2f4a6b",
    "sequence": 888,
    "successful_transaction_count": 2,
    "failed_transaction_count": 0,
    "operation_count": 3,
    "tx_set_operation_count": 3,
    "closed_at": "2015-10-01T04:16:07Z",
    "total_coins": "100000000000.0000000",
    "fee_pool": "0.0000300",
    "base_fee_in_stroops": 100,
    "base_reserve_in_stroops": 100000000,
    "max_tx_set_size": 500,
    "protocol_version": 1,
    "header_xdr": "AAAAAQ==",
}


@pytest.fixture
def ledger_json() -> bytes:
    return json.dumps(LEDGER).encode("utf-8")
