from .presenter import MemeGridPresenter, create_screen
from .viewmodels import (
    AlertViewModel, LoadingStateViewModel, MemeCardViewModel,
    MemeDetailViewModel, ScreenViewModel,
)

__all__ = [
    'MemeGridPresenter', 'create_screen',
    'AlertViewModel', 'LoadingStateViewModel', 'MemeCardViewModel',
    'MemeDetailViewModel', 'ScreenViewModel',
]
