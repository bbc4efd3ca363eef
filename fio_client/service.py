import logging
import threading
from datetime import date, datetime

import requests

from .api import FioApi
from .constants import (
    BASE_URL,
    DEFAULT_TIMEOUT,
    MIN_REQUEST_INTERVAL,
    POLL_INTERVAL,
    DataFormat,
)
from .helpers.date_range import DateRange
from .helpers.rate_limiter import RateLimiter
from .processors import JsonStatementParser, StringExtractor
from .request_factories import StatementRequestFactory, TextRequestFactory
from .result import Result
from .schemas import AccountStatement
from .settings import Settings
from .token import AccessToken
from .urls import UrlBuilder

logger = logging.getLogger(__name__)


class FioApiService:
    """One method per Fio API operation.

    Methods without the ``_text`` suffix return a parsed
    ``AccountStatement``; the ``_text`` variants return the raw body in the
    requested format. The bank allows one call per 30 seconds; ``FioApi``
    waits as needed, so consecutive calls block.
    """

    def __init__(
        self,
        api: FioApi,
        statements: StatementRequestFactory,
        texts: TextRequestFactory,
    ):
        self._api = api
        self._statements = statements
        self._texts = texts

    def get_transactions_since_last_download(
        self, cancel: threading.Event | None = None
    ) -> Result[AccountStatement]:
        request = self._statements.last_transactions()
        return self._api.send(request, cancel)

    def get_transactions_since_last_download_text(
        self,
        data_format: DataFormat,
        cancel: threading.Event | None = None,
    ) -> Result[str]:
        request = self._texts.last_transactions(data_format)
        return self._api.send(request, cancel)

    def get_transactions_in_date_range(
        self,
        date_range: DateRange,
        cancel: threading.Event | None = None,
    ) -> Result[AccountStatement]:
        request = self._statements.transactions_in_date_range(date_range)
        return self._api.send(request, cancel)

    def get_transactions_in_date_range_text(
        self,
        date_range: DateRange,
        data_format: DataFormat,
        cancel: threading.Event | None = None,
    ) -> Result[str]:
        request = self._texts.transactions_in_date_range(
            date_range, data_format
        )
        return self._api.send(request, cancel)

    def get_transactions_by_statement(
        self,
        statement_id: int,
        year: int,
        cancel: threading.Event | None = None,
    ) -> Result[AccountStatement]:
        request = self._statements.transactions_by_statement(
            year, statement_id
        )
        return self._api.send(request, cancel)

    def get_transactions_by_statement_text(
        self,
        statement_id: int,
        year: int,
        data_format: DataFormat,
        cancel: threading.Event | None = None,
    ) -> Result[str]:
        request = self._texts.transactions_by_statement(
            year, statement_id, data_format
        )
        return self._api.send(request, cancel)

    def get_last_statement(
        self,
        year: int | None = None,
        cancel: threading.Event | None = None,
    ) -> Result[str]:
        """Id and year of the last official statement, optionally in ``year``."""
        request = self._texts.last_statement(year)
        return self._api.send(request, cancel)

    def set_cursor_to_last_date(
        self,
        value: date | datetime,
        cancel: threading.Event | None = None,
    ) -> Result[str]:
        request = self._texts.set_last_date(value)
        return self._api.send(request, cancel)

    def set_cursor_to_last_id(
        self,
        movement_id: int,
        cancel: threading.Event | None = None,
    ) -> Result[str]:
        request = self._texts.set_last_id(movement_id)
        return self._api.send(request, cancel)


def create_service(
    token: str | AccessToken,
    *,
    base_url: str = BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    min_request_interval: float = MIN_REQUEST_INTERVAL,
    poll_interval: float = POLL_INTERVAL,
    session: requests.Session | None = None,
) -> FioApiService:
    if not isinstance(token, AccessToken):
        result = AccessToken.create(token)
        if result.is_failure:
            raise ValueError(result.error.message)
        token = result.unwrap()

    url_builder = UrlBuilder(token, base_url)
    limiter = RateLimiter(min_request_interval, poll_interval)
    api = FioApi(limiter, session=session, timeout=timeout)

    logger.debug(
        "Fio API service created: base_url=%s interval=%ss",
        base_url,
        min_request_interval,
    )
    return FioApiService(
        api,
        StatementRequestFactory(url_builder, JsonStatementParser()),
        TextRequestFactory(url_builder, StringExtractor()),
    )


def create_service_from_settings(
    settings: Settings,
    session: requests.Session | None = None,
) -> FioApiService:
    return create_service(
        settings.access_token,
        base_url=settings.base_url,
        timeout=settings.request_timeout,
        min_request_interval=settings.min_request_interval,
        session=session,
    )
