"""
Stellar Horizon Python Client

A Python client for querying a Horizon server and streaming its collections
as server-sent events.

Example usage:
    >>> from stellar_horizon import HorizonClient
    >>> from stellar_horizon.api import ledgers
    >>>
    >>> # One-shot request
    >>> with HorizonClient("https://horizon.stellar.org") as client:
    ...     headers, ledger = client.request(ledgers.single(888))
    >>>
    >>> # Stream new ledgers as they close
    >>> with HorizonClient("https://horizon.stellar.org") as client:
    ...     with client.stream(ledgers.all().with_cursor("now")) as events:
    ...         for ledger in events:
    ...             print(ledger.sequence)
"""

from stellar_horizon._errors import (
    FrameDecodeError,
    HorizonError,
    HorizonRequestError,
    HorizonServerError,
    InvalidHostError,
    ResourceDecodeError,
    StreamConnectionError,
)
from stellar_horizon._parse import RateLimit, parse_rate_limit
from stellar_horizon._sse import SSEDecoder, SSEFrame, encode_frame
from stellar_horizon._stream import AsyncResourceStream, ResourceStream
from stellar_horizon._types import (
    CLIENT_VERSION,
    EventId,
    HeadersLike,
    Join,
    Order,
    StreamState,
)
from stellar_horizon.aclient import AsyncHorizonClient
from stellar_horizon.client import HorizonClient
from stellar_horizon.request import PageRequest, Request, StreamRequest

__all__ = [
    # Types
    "Order",
    "Join",
    "EventId",
    "HeadersLike",
    "StreamState",
    "RateLimit",
    "SSEFrame",
    "SSEDecoder",
    # Errors
    "HorizonError",
    "InvalidHostError",
    "StreamConnectionError",
    "FrameDecodeError",
    "ResourceDecodeError",
    "HorizonRequestError",
    "HorizonServerError",
    # Requests
    "Request",
    "PageRequest",
    "StreamRequest",
    # Functions
    "parse_rate_limit",
    "encode_frame",
    # Clients and streams
    "HorizonClient",
    "AsyncHorizonClient",
    "ResourceStream",
    "AsyncResourceStream",
]

__version__ = CLIENT_VERSION
