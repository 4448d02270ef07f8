"""
Meme Ingestion Contracts

Immutable data structures for the fetch → decode pipeline.

BOUNDARY: Ingestion Layer
All meme data enters through these contracts.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from datetime import datetime, timezone
import hashlib


# =============================================================================
# RAW PAYLOAD
# =============================================================================

@dataclass(frozen=True)
class RawMemePayload:
    """
    Response body exactly as received.

    Handed from the fetcher to the decoder; never persisted.
    """
    url: str
    http_status: int
    raw_bytes: bytes
    content_hash: str
    fetched_at: datetime

    @classmethod
    def create(
        cls,
        url: str,
        http_status: int,
        raw_bytes: bytes,
        fetched_at: Optional[datetime] = None
    ) -> 'RawMemePayload':
        """Create from raw response."""
        return cls(
            url=url,
            http_status=http_status,
            raw_bytes=raw_bytes,
            content_hash=hashlib.sha256(raw_bytes).hexdigest(),
            fetched_at=fetched_at or datetime.now(timezone.utc),
        )

    @property
    def size(self) -> int:
        return len(self.raw_bytes)


# =============================================================================
# DECODED RECORDS
# =============================================================================

@dataclass(frozen=True)
class MemeRecord:
    """
    One decoded meme.

    Field names are Pythonic; the wire names are `id`, `name`, `url`,
    `width`, `height` and `box_count`.
    """
    meme_id: str
    name: str
    image_url: str
    width: int
    height: int
    box_count: int


@dataclass(frozen=True)
class MemeListResponse:
    """Top-level response envelope. Only lives for the duration of a decode."""
    success: bool
    memes: Tuple[MemeRecord, ...]
