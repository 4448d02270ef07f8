"""
Base Contracts and Shared Types

These are the foundational types used across all layers.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- Errors cross layer boundaries as values, never as exceptions
- All types are frozen dataclasses for immutability guarantee
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple
from enum import Enum


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorKind(Enum):
    """
    Coarse error families.

    FETCH and DECODE are the only ways a screen load can fail.
    PRESENTATION covers user input that the current state cannot accept.
    """
    FETCH = "fetch"
    DECODE = "decode"
    PRESENTATION = "presentation"


class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    No silent fallbacks - every error state is enumerated.
    """
    # Fetch errors
    INVALID_ENDPOINT = "invalid_endpoint"
    SOURCE_UNREACHABLE = "source_unreachable"
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"

    # Decode errors
    MALFORMED_PAYLOAD = "malformed_payload"
    SCHEMA_VIOLATION = "schema_violation"

    # Presentation errors
    INVALID_STATE_TRANSITION = "invalid_state_transition"

    @property
    def kind(self) -> ErrorKind:
        return _KIND_BY_CODE[self]


_KIND_BY_CODE = {
    ErrorCode.INVALID_ENDPOINT: ErrorKind.FETCH,
    ErrorCode.SOURCE_UNREACHABLE: ErrorKind.FETCH,
    ErrorCode.TIMEOUT: ErrorKind.FETCH,
    ErrorCode.HTTP_ERROR: ErrorKind.FETCH,
    ErrorCode.MALFORMED_PAYLOAD: ErrorKind.DECODE,
    ErrorCode.SCHEMA_VIOLATION: ErrorKind.DECODE,
    ErrorCode.INVALID_STATE_TRANSITION: ErrorKind.PRESENTATION,
}


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data, not exceptions - they can be stored and inspected.
    """
    code: ErrorCode
    message: str
    timestamp: datetime
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @staticmethod
    def create(code: ErrorCode, message: str) -> Error:
        return Error(code=code, message=message, timestamp=datetime.now(timezone.utc))

    @property
    def kind(self) -> ErrorKind:
        return self.code.kind

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
            timestamp=self.timestamp,
            context=self.context + ((key, value),)
        )

    def context_value(self, key: str) -> Optional[str]:
        for k, v in self.context:
            if k == key:
                return v
        return None


@dataclass(frozen=True)
class Result:
    """
    Generic result type for operations that can fail.
    Either contains a value OR an error, never both.
    """
    value: Optional[object] = None
    error: Optional[Error] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @staticmethod
    def success(value: object) -> Result:
        return Result(value=value, error=None)

    @staticmethod
    def failure(error: Error) -> Result:
        return Result(value=None, error=error)


# =============================================================================
# TEMPORAL TYPES
# =============================================================================

@dataclass(frozen=True)
class Timestamp:
    """
    Immutable timestamp with explicit semantics.
    All timestamps are UTC, never local time.
    """
    value: datetime

    def __post_init__(self):
        # Ensure UTC timezone
        if self.value.tzinfo is None:
            object.__setattr__(self, 'value', self.value.replace(tzinfo=timezone.utc))

    @staticmethod
    def now() -> Timestamp:
        return Timestamp(value=datetime.now(timezone.utc))

    def to_iso(self) -> str:
        return self.value.isoformat()
