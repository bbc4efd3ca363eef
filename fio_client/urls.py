"""
    URL templates of the Fio REST API.
    https://www.fio.cz/docs/cz/API_Bankovnictvi.pdf
"""
from datetime import date, datetime, timezone

from .constants import BASE_URL, DATE_FORMAT, DataFormat
from .errors import OutOfRangeError
from .helpers.date_range import DateRange
from .token import AccessToken


class UrlBuilder:
    def __init__(self, token: AccessToken, base_url: str = BASE_URL):
        self._token = token
        self._base_url = base_url.rstrip("/")

    def last_transactions(self, data_format: DataFormat) -> str:
        return (
            f"{self._base_url}/last/{self._token}/transactions.{data_format}"
        )

    def transactions_in_date_range(
        self,
        date_range: DateRange,
        data_format: DataFormat,
    ) -> str:
        start, end = date_range.format(DATE_FORMAT)
        return (
            f"{self._base_url}/periods/{self._token}/{start}/{end}"
            f"/transactions.{data_format}"
        )

    def transactions_by_statement(
        self,
        year: int,
        statement_id: int,
        data_format: DataFormat,
    ) -> str:
        if statement_id < 1:
            raise OutOfRangeError(
                "statement_id", "Statement ID must be a positive number."
            )
        if year < 1:
            raise OutOfRangeError("year", "Year must be a positive number.")

        return (
            f"{self._base_url}/by-id/{self._token}/{year}/{statement_id}"
            f"/transactions.{data_format}"
        )

    def last_statement(self, year: int | None = None) -> str:
        url = f"{self._base_url}/lastStatement/{self._token}/statement"
        if year is None:
            return url
        if year < 1:
            raise OutOfRangeError("year", "Year must be a positive number.")
        return f"{url}?year={year}"

    def set_last_date(self, value: date | datetime) -> str:
        if isinstance(value, datetime) and value.tzinfo is not None:
            # formatted in its own offset, but the instant must exist in UTC
            try:
                value.astimezone(timezone.utc)
            except OverflowError as e:
                raise OutOfRangeError(
                    "value",
                    "Date can not be earlier than the minimal date.",
                ) from e

        return (
            f"{self._base_url}/set-last-date/{self._token}"
            f"/{value.strftime(DATE_FORMAT)}/"
        )

    def set_last_id(self, movement_id: int) -> str:
        if movement_id < 1:
            raise OutOfRangeError(
                "movement_id", "Movement ID must be a positive number."
            )
        return f"{self._base_url}/set-last-id/{self._token}/{movement_id}/"
