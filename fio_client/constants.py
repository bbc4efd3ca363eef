import enum
from http import HTTPStatus
from typing import Final

BASE_URL: Final[str] = "https://fioapi.fio.cz/v1/rest"

DATE_FORMAT: Final[str] = "%Y-%m-%d"  # RRRR-MM-DD

MIN_REQUEST_INTERVAL: Final[float] = 30.0  # 1 request per 30 s per token
POLL_INTERVAL: Final[float] = 1.0
LOCK_POLL_INTERVAL: Final[float] = 0.1
DEFAULT_TIMEOUT: Final[float] = 60.0

USER_AGENT: Final[str] = "fio-client/0.1"


class DataFormat(enum.Enum):
    CSV = enum.auto()
    GPC = enum.auto()
    HTML = enum.auto()
    JSON = enum.auto()
    OFX = enum.auto()
    XML = enum.auto()

    def __str__(self) -> str:
        return self.name.lower()


class LogEvent(enum.StrEnum):
    API_CALL_EXCEPTION = enum.auto()
    API_RESPONSE = enum.auto()
    API_REQUEST = enum.auto()
    INVALID_REQUEST = enum.auto()
    RATE_LIMIT_WAIT = enum.auto()
    JSON_DESERIALIZATION = enum.auto()
    RESPONSE_STREAM_UNAVAILABLE = enum.auto()
    EMPTY_RESULT = enum.auto()


STATUS_CATEGORIES: Final[dict[int, str]] = {
    HTTPStatus.CONFLICT: (
        "Conflict: the 30 second limit between requests was not respected"
    ),
    HTTPStatus.NOT_FOUND: "Not found: wrong request format or unknown token",
    HTTPStatus.REQUEST_ENTITY_TOO_LARGE: (
        "Request entity too large: too many movements in the response"
    ),
    HTTPStatus.UNPROCESSABLE_ENTITY: (
        "Unprocessable entity: the request can not be processed"
    ),
    HTTPStatus.INTERNAL_SERVER_ERROR: (
        "Internal server error: the bank could not process the request"
    ),
}

EMPTY_INTERNAL_SERVER_ERROR_CATEGORY: Final[str] = (
    "Internal server error with empty response: token is probably invalid"
    " or expired"
)

UNEXPECTED_STATUS_CATEGORY: Final[str] = "Unexpected status code"
