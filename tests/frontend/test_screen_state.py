"""
Screen State Contract Tests

UIState snapshots are frozen and refuse to represent impossible screens.
"""

import pytest
from dataclasses import FrozenInstanceError

from backend.contracts.base import Error, ErrorCode
from frontend.presentation.viewmodels import MemeDetailViewModel
from frontend.state import ScreenPhase, UIState

from ..fixtures import FRY


class TestUIStateInvariants:

    def test_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            UIState().error_flag = True

    def test_error_flag_requires_failed(self):
        with pytest.raises(ValueError):
            UIState(phase=ScreenPhase.LOADED, error_flag=True)

    def test_detail_requires_selection(self):
        with pytest.raises(ValueError):
            UIState(phase=ScreenPhase.DETAIL_SHOWN, memes=(FRY,), detail_visible=True)

    def test_selection_requires_detail_phase(self):
        with pytest.raises(ValueError):
            UIState(phase=ScreenPhase.LOADED, memes=(FRY,), selected=FRY)

    @pytest.mark.parametrize("phase", [ScreenPhase.LOADING, ScreenPhase.FAILED])
    def test_unsettled_or_failed_hold_no_memes(self, phase):
        with pytest.raises(ValueError):
            UIState(phase=phase, memes=(FRY,))


class TestUIStateTransitions:

    def test_loaded_replaces_list(self):
        state = UIState.initial().loaded((FRY,))

        assert state.phase == ScreenPhase.LOADED
        assert state.memes == (FRY,)
        assert state.is_settled

    def test_failed_keeps_error_for_diagnostics(self):
        error = Error.create(ErrorCode.TIMEOUT, "Request timed out")

        state = UIState.initial().failed(error)

        assert state.error_flag is True
        assert state.last_error == error
        assert state.memes == ()

    def test_show_and_dismiss_round_trip(self):
        loaded = UIState.initial().loaded((FRY,))

        shown = loaded.showing(FRY)
        dismissed = shown.dismissed()

        assert shown.phase == ScreenPhase.DETAIL_SHOWN
        assert dismissed == loaded


class TestDetailViewModel:

    def test_aspect_ratio(self):
        detail = MemeDetailViewModel("1", "Fry", "http://x/1.jpg", width=1200, height=800, box_count=2)

        assert detail.aspect_ratio == pytest.approx(1.5)

    def test_aspect_ratio_unknown_for_zero_height(self):
        detail = MemeDetailViewModel("1", "Fry", "http://x/1.jpg", width=10, height=0, box_count=2)

        assert detail.aspect_ratio is None
