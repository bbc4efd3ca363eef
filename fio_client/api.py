"""
    Dispatcher for Fio REST API calls.
    The bank accepts one request per 30 seconds per token, so every call
    goes through one lock and one rate limiter.
"""
import logging
import threading
from dataclasses import dataclass
from http import HTTPStatus
from typing import Generic, TypeVar

import requests

from .constants import (
    DEFAULT_TIMEOUT,
    EMPTY_INTERNAL_SERVER_ERROR_CATEGORY,
    LOCK_POLL_INTERVAL,
    STATUS_CATEGORIES,
    UNEXPECTED_STATUS_CATEGORY,
    USER_AGENT,
    LogEvent,
)
from .errors import ErrorKind, FioError, RequestCancelledError
from .helpers.rate_limiter import RateLimiter
from .processors import ResponseProcessor
from .result import Result

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FioRequest(Generic[T]):
    url: str
    processor: ResponseProcessor[T]


class FioApi:
    def __init__(
        self,
        limiter: RateLimiter,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if limiter is None:
            raise ValueError("limiter is required")
        self._limiter = limiter
        self._s = session if session is not None else requests.Session()
        self._s.headers.clear()
        self._s.headers.update({"User-Agent": USER_AGENT})
        self._timeout = timeout
        self._lock = threading.Lock()

    @property
    def limiter(self) -> RateLimiter:
        return self._limiter

    def send(
        self,
        request: FioRequest[T] | None,
        cancel: threading.Event | None = None,
    ) -> Result[T]:
        if request is None:
            logger.error(
                "Fio request is missing.",
                extra={"event": LogEvent.INVALID_REQUEST},
            )
            return Result.failure(
                FioError(
                    kind=ErrorKind.INVALID_REQUEST,
                    message="Fio request can not be None.",
                )
            )

        if not self._acquire(cancel):
            return self._exception_failure(
                RequestCancelledError("Cancelled while waiting for the lock"),
                request.url,
            )
        try:
            return self._send_locked(request, cancel)
        finally:
            self._lock.release()

    def _acquire(self, cancel: threading.Event | None) -> bool:
        if cancel is None:
            return self._lock.acquire()
        timeout = min(LOCK_POLL_INTERVAL, self._limiter.poll_interval)
        while not self._lock.acquire(timeout=timeout):
            if cancel.is_set():
                return False
        return True

    def _send_locked(
        self,
        request: FioRequest[T],
        cancel: threading.Event | None,
    ) -> Result[T]:
        if (remaining := self._limiter.remaining()) > 0:
            logger.info(
                "Waiting %.1fs before the next Fio API call.",
                remaining,
                extra={"event": LogEvent.RATE_LIMIT_WAIT},
            )
        if not self._limiter.wait(cancel):
            return self._exception_failure(
                RequestCancelledError("Cancelled while waiting for rate limit"),
                request.url,
            )

        logger.debug(
            "GET %s", request.url, extra={"event": LogEvent.API_REQUEST}
        )
        # every GET that was sent consumes the window, whatever its outcome
        try:
            try:
                r = self._s.get(request.url, timeout=self._timeout)
            except requests.RequestException as e:
                return self._exception_failure(e, request.url)

            if cancel is not None and cancel.is_set():
                return self._exception_failure(
                    RequestCancelledError("Cancelled after the response arrived"),
                    request.url,
                )

            if r.status_code == HTTPStatus.OK:
                return request.processor.process(r)
            return self._status_failure(r, request.url)
        finally:
            self._limiter.mark()

    @staticmethod
    def _read_body(r: requests.Response) -> str:
        try:
            return r.text
        except (requests.RequestException, RuntimeError) as e:
            logger.warning("Failed to read error response body: %s", e)
            return ""

    def _status_failure(self, r: requests.Response, url: str) -> Result[T]:
        body = self._read_body(r)
        status = r.status_code
        empty_body = not body

        category = STATUS_CATEGORIES.get(status, UNEXPECTED_STATUS_CATEGORY)
        if status == HTTPStatus.INTERNAL_SERVER_ERROR and empty_body:
            category = EMPTY_INTERNAL_SERVER_ERROR_CATEGORY

        logger.error(
            "Fio API returned status %s for %s: %s. Server response: %s",
            status,
            url,
            category,
            body,
            extra={"event": LogEvent.API_RESPONSE},
        )
        return Result.failure(
            FioError(
                kind=ErrorKind.UNEXPECTED_STATUS,
                message=(
                    f"Fio API returned status {status} for {url}: {category}."
                    f" Server response: {body}"
                ),
                url=url,
                status_code=status,
                body=body,
                category=category,
                empty_body=empty_body,
            )
        )

    @staticmethod
    def _exception_failure(exc: Exception, url: str) -> Result[T]:
        name = type(exc).__name__
        logger.error(
            "Exception %s during Fio API call %s: %s",
            name,
            url,
            exc,
            extra={"event": LogEvent.API_CALL_EXCEPTION},
        )
        return Result.failure(
            FioError(
                kind=ErrorKind.TRANSPORT_FAILURE,
                message=f"Exception {name} during Fio API call {url}.",
                detail=str(exc),
                url=url,
                exception=name,
            )
        )
