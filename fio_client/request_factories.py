from datetime import date, datetime

from .api import FioRequest
from .constants import DataFormat
from .helpers.date_range import DateRange
from .processors import JsonStatementParser, StringExtractor
from .schemas import AccountStatement
from .urls import UrlBuilder


class StatementRequestFactory:
    """Requests whose JSON response is parsed into an ``AccountStatement``."""

    def __init__(self, url_builder: UrlBuilder, parser: JsonStatementParser):
        self._urls = url_builder
        self._parser = parser

    def _create(self, url: str) -> FioRequest[AccountStatement]:
        return FioRequest(url=url, processor=self._parser)

    def last_transactions(self) -> FioRequest[AccountStatement]:
        return self._create(self._urls.last_transactions(DataFormat.JSON))

    def transactions_in_date_range(
        self, date_range: DateRange
    ) -> FioRequest[AccountStatement]:
        return self._create(
            self._urls.transactions_in_date_range(date_range, DataFormat.JSON)
        )

    def transactions_by_statement(
        self, year: int, statement_id: int
    ) -> FioRequest[AccountStatement]:
        return self._create(
            self._urls.transactions_by_statement(
                year, statement_id, DataFormat.JSON
            )
        )


class TextRequestFactory:
    """Requests whose response body is returned as plain text."""

    def __init__(
        self,
        url_builder: UrlBuilder,
        extractor: StringExtractor | None = None,
    ):
        self._urls = url_builder
        self._extractor = extractor or StringExtractor()

    def _create(self, url: str) -> FioRequest[str]:
        return FioRequest(url=url, processor=self._extractor)

    def last_transactions(self, data_format: DataFormat) -> FioRequest[str]:
        return self._create(self._urls.last_transactions(data_format))

    def transactions_in_date_range(
        self, date_range: DateRange, data_format: DataFormat
    ) -> FioRequest[str]:
        return self._create(
            self._urls.transactions_in_date_range(date_range, data_format)
        )

    def transactions_by_statement(
        self, year: int, statement_id: int, data_format: DataFormat
    ) -> FioRequest[str]:
        return self._create(
            self._urls.transactions_by_statement(
                year, statement_id, data_format
            )
        )

    def last_statement(self, year: int | None = None) -> FioRequest[str]:
        return self._create(self._urls.last_statement(year))

    def set_last_date(self, value: date | datetime) -> FioRequest[str]:
        return self._create(self._urls.set_last_date(value))

    def set_last_id(self, movement_id: int) -> FioRequest[str]:
        return self._create(self._urls.set_last_id(movement_id))
