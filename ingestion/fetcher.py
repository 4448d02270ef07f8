"""
Meme Fetcher

Issues the single GET for the meme list.

PRINCIPLES:
===========
1. One attempt per call - no retry, no backoff
2. Failed fetches are returned as Result.failure, never raised
3. The body is handed on untouched; parsing is the decoder's job
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from datetime import datetime, timezone

import httpx

from backend.contracts.base import Error, ErrorCode, Result
from backend.observability import AuditOutcome, LogCollector, get_logger

from .config import DEFAULT_USER_AGENT
from .contracts import RawMemePayload


logger = get_logger(__name__)

ALLOWED_SCHEMES = ("http", "https")


class MemeFetcher:
    """
    Fetches the raw meme list body.

    GUARANTEES:
    ===========
    1. Malformed endpoints fail with INVALID_ENDPOINT before any I/O
    2. Transport failures fail with SOURCE_UNREACHABLE or TIMEOUT
    3. Non-2xx responses fail with HTTP_ERROR, status attached as context
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Any = None,
        collector: Optional[LogCollector] = None
    ):
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport
        self._collector = collector

    async def fetch(self, endpoint: str) -> Result:
        """
        Fetch the endpoint.

        Returns Result with a RawMemePayload on success.
        """
        invalid = self._validate_endpoint(endpoint)
        if invalid is not None:
            return self._fail(endpoint, invalid)

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.get(endpoint, headers=self._headers())
        except Exception as e:
            return self._fail(endpoint, self._error_from_exception(endpoint, e))

        return self._settle(endpoint, response)

    def fetch_sync(self, endpoint: str) -> Result:
        """Synchronous version of fetch."""
        invalid = self._validate_endpoint(endpoint)
        if invalid is not None:
            return self._fail(endpoint, invalid)

        try:
            with httpx.Client(**self._client_kwargs()) as client:
                response = client.get(endpoint, headers=self._headers())
        except Exception as e:
            return self._fail(endpoint, self._error_from_exception(endpoint, e))

        return self._settle(endpoint, response)

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {'follow_redirects': True}
        if self._timeout is not None:
            kwargs['timeout'] = self._timeout
        if self._transport is not None:
            kwargs['transport'] = self._transport
        return kwargs

    def _headers(self) -> Dict[str, str]:
        return {'User-Agent': self._user_agent}

    def _validate_endpoint(self, endpoint: str) -> Optional[Error]:
        """Reject endpoints that cannot be requested at all."""
        if not isinstance(endpoint, str) or not endpoint.strip():
            return Error.create(ErrorCode.INVALID_ENDPOINT, "Endpoint is empty")

        try:
            url = httpx.URL(endpoint)
        except httpx.InvalidURL as e:
            return Error.create(ErrorCode.INVALID_ENDPOINT, f"Malformed endpoint: {e}")

        if url.scheme not in ALLOWED_SCHEMES:
            return Error.create(
                ErrorCode.INVALID_ENDPOINT,
                f"Unsupported scheme '{url.scheme}'"
            ).with_context('endpoint', endpoint)

        if not url.host:
            return Error.create(
                ErrorCode.INVALID_ENDPOINT, "Endpoint has no host"
            ).with_context('endpoint', endpoint)

        return None

    def _error_from_exception(self, endpoint: str, error: Exception) -> Error:
        if isinstance(error, httpx.TimeoutException):
            code, message = ErrorCode.TIMEOUT, "Request timed out"
        elif isinstance(error, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
            code, message = ErrorCode.INVALID_ENDPOINT, str(error)
        else:
            if not isinstance(error, httpx.RequestError):
                logger.exception("Unexpected error fetching %s", endpoint)
            code, message = ErrorCode.SOURCE_UNREACHABLE, str(error) or type(error).__name__

        return (
            Error.create(code, message)
            .with_context('endpoint', endpoint)
            .with_context('exception', type(error).__name__)
        )

    def _settle(self, endpoint: str, response: httpx.Response) -> Result:
        fetched_at = datetime.now(timezone.utc)

        if not response.is_success:
            error = (
                Error.create(ErrorCode.HTTP_ERROR, f"HTTP {response.status_code}")
                .with_context('endpoint', endpoint)
                .with_context('http_status', str(response.status_code))
            )
            return self._fail(endpoint, error)

        payload = RawMemePayload.create(
            url=endpoint,
            http_status=response.status_code,
            raw_bytes=response.content,
            fetched_at=fetched_at,
        )
        if self._collector:
            self._collector.record(
                'fetch',
                AuditOutcome.SUCCESS,
                endpoint=endpoint,
                http_status=payload.http_status,
                bytes=payload.size,
            )
        return Result.success(payload)

    def _fail(self, endpoint: str, error: Error) -> Result:
        if self._collector:
            self._collector.record(
                'fetch',
                AuditOutcome.FAILURE,
                endpoint=endpoint,
                code=error.code.value,
                message=error.message,
            )
        else:
            logger.warning("fetch failed for %s: %s", endpoint, error.message)
        return Result.failure(error)
