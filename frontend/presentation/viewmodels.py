"""
Presentation Contracts

Responsibility:
Define ViewModel contracts for pure UI components.
Strictly decoupled from fetching and decoding.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from frontend.state import ScreenPhase


ALERT_TITLE = "Loading Error"
ALERT_MESSAGE = "There was a problem loading the Epic Meme data"


@dataclass(frozen=True)
class MemeCardViewModel:
    """ViewModel for one grid cell."""
    meme_id: str
    caption: str
    image_url: str
    position: int
    is_selected: bool


@dataclass(frozen=True)
class MemeDetailViewModel:
    """ViewModel for the detail sheet."""
    meme_id: str
    title: str
    image_url: str
    width: int
    height: int
    box_count: int

    @property
    def aspect_ratio(self) -> Optional[float]:
        if self.height <= 0:
            return None
        return self.width / self.height


@dataclass(frozen=True)
class AlertViewModel:
    """
    The one generic failure notice.

    Fetch and decode failures render identically.
    """
    title: str = ALERT_TITLE
    message: str = ALERT_MESSAGE


@dataclass(frozen=True)
class LoadingStateViewModel:
    """Unified loading state."""
    message: str
    progress: Optional[float]
    is_blocking: bool


@dataclass(frozen=True)
class ScreenViewModel:
    """Everything needed to draw the screen once."""
    title: str
    phase: ScreenPhase
    cards: Tuple[MemeCardViewModel, ...]
    detail: Optional[MemeDetailViewModel]
    alert: Optional[AlertViewModel]
    loading: Optional[LoadingStateViewModel]

    @property
    def is_empty(self) -> bool:
        return not self.cards
