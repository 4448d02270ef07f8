"""
Screen State

The single piece of mutable UI state, expressed as an immutable snapshot.
The presenter replaces the snapshot on every transition; nothing else
writes it.

STATE MACHINE:
==============
LOADING      --fetch settled (ok)-->     LOADED
LOADING      --fetch settled (error)-->  FAILED
LOADED       --select-->                 DETAIL_SHOWN
DETAIL_SHOWN --dismiss-->                LOADED
FAILED       --acknowledge-->            FAILED (notice cleared)
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple
from enum import Enum

from backend.contracts.base import Error
from ingestion.contracts import MemeRecord


class ScreenPhase(Enum):
    """Presenter lifecycle phase."""
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"
    DETAIL_SHOWN = "detail_shown"


@dataclass(frozen=True)
class UIState:
    """
    Snapshot of the screen.

    INVARIANTS:
    ===========
    - memes is empty or exactly the last decoded sequence
    - phase is DETAIL_SHOWN iff detail_visible iff selected is set
    - error_flag only while phase is FAILED
    """
    phase: ScreenPhase = ScreenPhase.LOADING
    memes: Tuple[MemeRecord, ...] = ()
    error_flag: bool = False
    selected: Optional[MemeRecord] = None
    detail_visible: bool = False

    # Diagnostics only; never rendered
    last_error: Optional[Error] = None

    def __post_init__(self):
        showing = self.phase == ScreenPhase.DETAIL_SHOWN
        if showing != self.detail_visible or showing != (self.selected is not None):
            raise ValueError("detail_visible and selected must agree with phase")
        if self.error_flag and self.phase != ScreenPhase.FAILED:
            raise ValueError("error_flag can only be set while FAILED")
        if self.phase in (ScreenPhase.LOADING, ScreenPhase.FAILED) and self.memes:
            raise ValueError(f"{self.phase.value} state cannot hold memes")

    @staticmethod
    def initial() -> UIState:
        return UIState()

    def loaded(self, memes: Tuple[MemeRecord, ...]) -> UIState:
        return UIState(phase=ScreenPhase.LOADED, memes=tuple(memes))

    def failed(self, error: Error) -> UIState:
        return UIState(phase=ScreenPhase.FAILED, error_flag=True, last_error=error)

    def showing(self, meme: MemeRecord) -> UIState:
        return replace(self, phase=ScreenPhase.DETAIL_SHOWN, selected=meme, detail_visible=True)

    def dismissed(self) -> UIState:
        return replace(self, phase=ScreenPhase.LOADED, selected=None, detail_visible=False)

    def acknowledged(self) -> UIState:
        return replace(self, error_flag=False)

    @property
    def is_settled(self) -> bool:
        return self.phase != ScreenPhase.LOADING
