"""
Interaction Contracts

Responsibility:
Define valid user actions and their intent.
No execution logic - just pure intent modeling.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from datetime import datetime, timezone
import uuid

from ingestion.contracts import MemeRecord


class ActionType(Enum):
    """Types of user interaction."""
    SELECT_MEME = "select_meme"
    DISMISS_DETAIL = "dismiss_detail"
    ACKNOWLEDGE_ALERT = "acknowledge_alert"


@dataclass(frozen=True)
class InteractionRequest:
    """A specific user intent."""
    action: ActionType
    meme: Optional[MemeRecord] = None
    source_component: str = "grid"
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.action == ActionType.SELECT_MEME and self.meme is None:
            raise ValueError("SELECT_MEME requires a meme")

    @classmethod
    def select(cls, meme: MemeRecord) -> 'InteractionRequest':
        return cls(action=ActionType.SELECT_MEME, meme=meme)

    @classmethod
    def dismiss(cls) -> 'InteractionRequest':
        return cls(action=ActionType.DISMISS_DETAIL, source_component="detail")

    @classmethod
    def acknowledge(cls) -> 'InteractionRequest':
        return cls(action=ActionType.ACKNOWLEDGE_ALERT, source_component="alert")
