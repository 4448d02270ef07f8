"""
Observability & Audit Layer

RESPONSIBILITY: Developer-facing logging and an append-only audit trail
ALLOWED INPUTS: Events reported by the ingestion and presentation layers
OUTPUTS: AuditLogEntry records, log lines

WHAT THIS LAYER MUST NOT DO:
============================
- Modify system behavior
- Surface anything to the end user
- Make decisions based on logged data
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum
import logging

from ..contracts.base import Timestamp


LOGGER_NAMESPACE = "epic_memes"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the application namespace."""
    if name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def configure_logging(level: str = "INFO") -> None:
    """Configure root handlers once; later calls only adjust the level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=DEFAULT_LOG_FORMAT,
    )
    logging.getLogger(LOGGER_NAMESPACE).setLevel(getattr(logging, level.upper(), logging.INFO))


# =============================================================================
# AUDIT ENTRIES
# =============================================================================

class AuditOutcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    REJECTED = "rejected"


@dataclass(frozen=True)
class AuditLogEntry:
    """Immutable record of one observed event."""
    sequence: int
    layer: str
    action: str
    outcome: AuditOutcome
    timestamp: Timestamp
    details: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def detail(self, key: str) -> Optional[str]:
        for k, v in self.details:
            if k == key:
                return v
        return None


# =============================================================================
# LOG COLLECTOR
# =============================================================================

class LogCollector:
    """
    Append-only audit collector for a single layer.

    Every recorded entry is also written to the layer's logger so that
    diagnostics show up without reading the collector.
    """

    def __init__(self, layer_name: str):
        self._layer_name = layer_name
        self._entries: List[AuditLogEntry] = []
        self._logger = get_logger(layer_name)

    def record(
        self,
        action: str,
        outcome: AuditOutcome = AuditOutcome.SUCCESS,
        **details: object
    ) -> AuditLogEntry:
        """Append an entry and log it."""
        entry = AuditLogEntry(
            sequence=len(self._entries),
            layer=self._layer_name,
            action=action,
            outcome=outcome,
            timestamp=Timestamp.now(),
            details=tuple((k, str(v)) for k, v in sorted(details.items())),
        )
        self._entries.append(entry)

        level = logging.INFO if outcome == AuditOutcome.SUCCESS else logging.WARNING
        rendered = " ".join(f"{k}={v}" for k, v in entry.details)
        self._logger.log(level, "%s %s %s", action, outcome.value, rendered)
        return entry

    def get_entries(
        self,
        action: Optional[str] = None,
        outcome: Optional[AuditOutcome] = None
    ) -> List[AuditLogEntry]:
        """Get entries, optionally filtered."""
        entries = self._entries

        if action:
            entries = [e for e in entries if e.action == action]

        if outcome:
            entries = [e for e in entries if e.outcome == outcome]

        return list(entries)

    @property
    def layer_name(self) -> str:
        return self._layer_name

    @property
    def entry_count(self) -> int:
        return len(self._entries)
