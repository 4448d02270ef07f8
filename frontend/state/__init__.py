"""
State Access Layer

Responsibility:
Hold the screen's UI state as frozen snapshots.

PRINCIPLES:
1. Immutable (Frozen)
2. No Rendering Logic
3. Transitions produce new snapshots
"""

from .screen import ScreenPhase, UIState

__all__ = ['ScreenPhase', 'UIState']
