import json
import logging
from decimal import Decimal
from typing import Protocol, TypeVar

import requests
from pydantic import ValidationError

from .constants import LogEvent
from .errors import ErrorKind, FioError
from .result import Result
from .schemas import AccountStatement, StatementRoot

T_co = TypeVar("T_co", covariant=True)

logger = logging.getLogger(__name__)


class ResponseProcessor(Protocol[T_co]):
    def process(self, response: requests.Response) -> Result[T_co]: ...


class StringExtractor:
    """Returns the response body as text."""

    def process(self, response: requests.Response) -> Result[str]:
        return Result.success(response.text)


class JsonStatementParser:
    """Deserializes a JSON response body into an ``AccountStatement``.

    Numbers are decoded as ``Decimal`` so that amounts and balances keep
    the exact value sent by the bank.
    """

    def process(self, response: requests.Response) -> Result[AccountStatement]:
        try:
            content = response.content
        except (requests.RequestException, RuntimeError) as e:
            return self._stream_unavailable(f"{type(e).__name__}: {e}")

        if content is None:
            return self._stream_unavailable("response has no body stream")

        return self.parse(content)

    def parse(self, content: bytes | str) -> Result[AccountStatement]:
        if not content.strip():
            return self._empty_result("response body is empty")

        try:
            data = json.loads(content, parse_float=Decimal)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return self._deserialization_error(e)

        if data is None:
            return self._empty_result("response body is JSON null")

        try:
            root = StatementRoot.model_validate(data)
        except ValidationError as e:
            return self._deserialization_error(e)

        if root.account_statement is None:
            return self._empty_result("accountStatement is missing")

        return Result.success(root.account_statement)

    @staticmethod
    def _stream_unavailable(detail: str) -> Result[AccountStatement]:
        logger.error(
            "Response stream is unavailable: %s",
            detail,
            extra={"event": LogEvent.RESPONSE_STREAM_UNAVAILABLE},
        )
        return Result.failure(
            FioError(
                kind=ErrorKind.STREAM_UNAVAILABLE,
                message="Response stream can not be read.",
                detail=detail,
            )
        )

    @staticmethod
    def _empty_result(detail: str) -> Result[AccountStatement]:
        logger.error(
            "JSON deserialization returned no data: %s",
            detail,
            extra={"event": LogEvent.EMPTY_RESULT},
        )
        return Result.failure(
            FioError(
                kind=ErrorKind.EMPTY_RESULT,
                message="JSON deserialization returned no data.",
                detail=detail,
            )
        )

    @staticmethod
    def _deserialization_error(exc: Exception) -> Result[AccountStatement]:
        logger.error(
            "Exception %s during JSON deserialization: %s",
            type(exc).__name__,
            exc,
            extra={"event": LogEvent.JSON_DESERIALIZATION},
        )
        return Result.failure(
            FioError(
                kind=ErrorKind.DESERIALIZATION_ERROR,
                message=(
                    f"Exception {type(exc).__name__} "
                    "during JSON deserialization."
                ),
                detail=str(exc),
                exception=type(exc).__name__,
            )
        )
