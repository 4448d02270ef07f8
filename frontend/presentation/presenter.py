"""
Meme Grid Presenter

Owns the screen state and drives it from two kinds of events:
fetch-settled and user interaction.

GUARANTEES:
===========
1. At most one fetch per presenter instance
2. Fetch and decode failures collapse into one generic notice
3. Rejected transitions return a failure Result and leave state untouched
4. Nothing raised by fetching, decoding or user input escapes
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional

from backend.contracts.base import Error, ErrorCode, ErrorKind, Result
from backend.observability import AuditOutcome, LogCollector, get_logger
from ingestion.config import DEFAULT_SCREEN_TITLE, EndpointConfig
from ingestion.contracts import MemeRecord
from ingestion.decoder import MemeDecoder
from ingestion.fetcher import MemeFetcher
from frontend.interaction import ActionType, InteractionRequest
from frontend.state import ScreenPhase, UIState

from .viewmodels import (
    AlertViewModel, LoadingStateViewModel, MemeCardViewModel,
    MemeDetailViewModel, ScreenViewModel,
)


logger = get_logger(__name__)


class MemeGridPresenter:
    """
    Presenter for the meme grid screen.

    The fetcher and decoder are injected; the presenter never touches the
    network itself.
    """

    def __init__(
        self,
        endpoint: str,
        fetcher: MemeFetcher,
        decoder: MemeDecoder,
        title: str = DEFAULT_SCREEN_TITLE,
        collector: Optional[LogCollector] = None
    ):
        self._endpoint = endpoint
        self._fetcher = fetcher
        self._decoder = decoder
        self._title = title
        self._collector = collector or LogCollector('presentation')
        self._state = UIState.initial()
        self._mounted = False

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def mount(self) -> Result:
        """Fetch and decode once, then settle the screen."""
        rejected = self._claim_mount()
        if rejected is not None:
            return rejected

        try:
            fetched = await self._fetcher.fetch(self._endpoint)
        except Exception as e:
            fetched = self._unexpected(ErrorCode.SOURCE_UNREACHABLE, 'fetch', e)
        return self.on_fetch_settled(self._decode(fetched))

    def mount_sync(self) -> Result:
        """Synchronous version of mount."""
        rejected = self._claim_mount()
        if rejected is not None:
            return rejected

        try:
            fetched = self._fetcher.fetch_sync(self._endpoint)
        except Exception as e:
            fetched = self._unexpected(ErrorCode.SOURCE_UNREACHABLE, 'fetch', e)
        return self.on_fetch_settled(self._decode(fetched))

    def on_fetch_settled(self, result: Result) -> Result:
        """
        Apply the outcome of fetch + decode.

        A success value is the decoded tuple of MemeRecord; it replaces the
        displayed list wholesale.
        """
        if self._state.phase != ScreenPhase.LOADING:
            return self._reject('fetch_settled')

        if result.is_success:
            memes = tuple(result.value)
            self._state = self._state.loaded(memes)
            self._collector.record('fetch_settled', AuditOutcome.SUCCESS, count=len(memes))
            return Result.success(self._state)

        error = result.error
        if error is None or error.kind not in (ErrorKind.FETCH, ErrorKind.DECODE):
            error = Error.create(ErrorCode.SOURCE_UNREACHABLE, "Fetch settled without a value")

        self._state = self._state.failed(error)
        self._collector.record(
            'fetch_settled',
            AuditOutcome.FAILURE,
            kind=error.kind.value,
            code=error.code.value,
        )
        return Result.success(self._state)

    # =========================================================================
    # USER INTERACTION
    # =========================================================================

    def select(self, meme: MemeRecord) -> Result:
        """Show the detail view for a displayed meme."""
        if self._state.phase != ScreenPhase.LOADED:
            return self._reject('select')
        if meme not in self._state.memes:
            return self._reject('select', reason='meme is not displayed')

        self._state = self._state.showing(meme)
        self._collector.record('select', meme_id=meme.meme_id)
        return Result.success(self._state)

    def dismiss_detail(self) -> Result:
        """Close the detail view; the list is untouched."""
        if self._state.phase != ScreenPhase.DETAIL_SHOWN:
            return self._reject('dismiss_detail')

        self._state = self._state.dismissed()
        self._collector.record('dismiss_detail')
        return Result.success(self._state)

    def acknowledge_error(self) -> Result:
        """Clear the pending notice. Does not re-fetch."""
        if not self._state.error_flag:
            return self._reject('acknowledge_error')

        self._state = self._state.acknowledged()
        self._collector.record('acknowledge_error')
        return Result.success(self._state)

    def dispatch(self, request: InteractionRequest) -> Result:
        """Route a user intent to its transition."""
        if request.action == ActionType.SELECT_MEME:
            return self.select(request.meme)
        if request.action == ActionType.DISMISS_DETAIL:
            return self.dismiss_detail()
        if request.action == ActionType.ACKNOWLEDGE_ALERT:
            return self.acknowledge_error()
        return self._reject(request.action.value)

    # =========================================================================
    # RENDERING
    # =========================================================================

    def render(self) -> ScreenViewModel:
        state = self._state

        # Ids may repeat, so match on the whole record
        cards = tuple(
            MemeCardViewModel(
                meme_id=meme.meme_id,
                caption=meme.name,
                image_url=meme.image_url,
                position=position,
                is_selected=state.selected is not None and meme == state.selected,
            )
            for position, meme in enumerate(state.memes)
        )

        detail = None
        if state.detail_visible and state.selected is not None:
            detail = MemeDetailViewModel(
                meme_id=state.selected.meme_id,
                title=state.selected.name,
                image_url=state.selected.image_url,
                width=state.selected.width,
                height=state.selected.height,
                box_count=state.selected.box_count,
            )

        loading = None
        if state.phase == ScreenPhase.LOADING:
            loading = LoadingStateViewModel(message="Loading memes", progress=None, is_blocking=False)

        return ScreenViewModel(
            title=self._title,
            phase=state.phase,
            cards=cards,
            detail=detail,
            alert=AlertViewModel() if state.error_flag else None,
            loading=loading,
        )

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def collector(self) -> LogCollector:
        return self._collector

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _claim_mount(self) -> Optional[Result]:
        if self._mounted:
            return self._reject('mount', reason='already mounted')
        self._mounted = True
        self._collector.record('mount', endpoint=self._endpoint)
        return None

    def _decode(self, fetched: Result) -> Result:
        if fetched.is_failure:
            return fetched
        try:
            return self._decoder.decode(fetched.value.raw_bytes)
        except Exception as e:
            return self._unexpected(ErrorCode.MALFORMED_PAYLOAD, 'decode', e)

    def _unexpected(self, code: ErrorCode, stage: str, exc: Exception) -> Result:
        # Every mount settles the screen, even when a collaborator raises
        logger.exception("Unexpected error during %s of %s", stage, self._endpoint)
        error = (
            Error.create(code, f"Unexpected {type(exc).__name__} during {stage}: {exc}")
            .with_context('stage', stage)
        )
        return Result.failure(error)

    def _reject(self, action: str, reason: Optional[str] = None) -> Result:
        message = reason or f"{action} not allowed in phase {self._state.phase.value}"
        error = (
            Error.create(ErrorCode.INVALID_STATE_TRANSITION, message)
            .with_context('phase', self._state.phase.value)
        )
        self._collector.record(action, AuditOutcome.REJECTED, reason=message)
        return Result.failure(error)


def create_screen(
    config_path: Optional[Path] = None,
    transport=None
) -> MemeGridPresenter:
    """Create a presenter wired from configuration."""
    config = EndpointConfig.load(config_path)
    ingestion_log = LogCollector('ingestion')

    return MemeGridPresenter(
        endpoint=config.url,
        fetcher=MemeFetcher(
            timeout=config.timeout_seconds,
            user_agent=config.user_agent,
            transport=transport,
            collector=ingestion_log,
        ),
        decoder=MemeDecoder(collector=ingestion_log),
        title=config.screen_title,
        collector=LogCollector('presentation'),
    )
