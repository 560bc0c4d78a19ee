"""
Core types and protocol constants for the Horizon client.

This module defines the fundamental types used throughout the library.
"""

import enum
from collections.abc import Callable
from importlib.metadata import PackageNotFoundError, version
from typing import Literal

# Record ordering for paginated endpoints
Order = Literal["asc", "desc"]

# Optional data joined into operation/payment records
Join = Literal["transactions"]

# Opaque SSE event id used to resume a stream
EventId = str

# Type for headers - can be static strings or callables
HeadersLike = dict[str, str | Callable[[], str]]


class StreamState(enum.Enum):
    """
    Lifecycle of a single stream subscription.

    DISCONNECTED -> CONNECTING -> STREAMING, with FAILED and CLOSED as the
    two terminal states.
    """

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    STREAMING = "streaming"
    FAILED = "failed"
    CLOSED = "closed"

    @property
    def is_terminal(self) -> bool:
        return self in (StreamState.FAILED, StreamState.CLOSED)


# Client identification
CLIENT_NAME = "stellar-horizon-py"
CLIENT_NAME_HEADER = "X-Client-Name"
CLIENT_VERSION_HEADER = "X-Client-Version"

# SSE negotiation and resumption
ACCEPT_HEADER = "Accept"
EVENT_STREAM_CONTENT_TYPE = "text/event-stream"
LAST_EVENT_ID_HEADER = "Last-Event-Id"

# Name of the SSE events that carry resources
MESSAGE_EVENT = "message"

# Rate limiting headers
RATE_LIMIT_LIMIT_HEADER = "X-Ratelimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-Ratelimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-Ratelimit-Reset"

# Pagination query parameters
CURSOR_QUERY_PARAM = "cursor"
LIMIT_QUERY_PARAM = "limit"
ORDER_QUERY_PARAM = "order"

# Seconds; applies to one-shot requests and to connecting a stream
DEFAULT_TIMEOUT = 60.0

# Use importlib.metadata for version (works with installed package)
# Fall back to hard-coded version for editable installs
try:
    CLIENT_VERSION = version("stellar-horizon")
except PackageNotFoundError:
    CLIENT_VERSION = "0.1.0"
