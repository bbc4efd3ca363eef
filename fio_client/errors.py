import enum

from pydantic import BaseModel, ConfigDict


class ErrorKind(enum.StrEnum):
    TOKEN_EMPTY = enum.auto()
    TOKEN_TOO_SHORT = enum.auto()
    TOKEN_INVALID_CHARACTERS = enum.auto()
    INVALID_DATE_RANGE = enum.auto()
    INVALID_REQUEST = enum.auto()
    TRANSPORT_FAILURE = enum.auto()
    UNEXPECTED_STATUS = enum.auto()
    STREAM_UNAVAILABLE = enum.auto()
    EMPTY_RESULT = enum.auto()
    DESERIALIZATION_ERROR = enum.auto()


class FioError(BaseModel):
    """Failure payload carried by a failed ``Result``."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    detail: str | None = None
    url: str | None = None
    status_code: int | None = None
    body: str | None = None
    category: str | None = None
    exception: str | None = None
    empty_body: bool | None = None

    def __str__(self) -> str:
        return self.message


class OutOfRangeError(ValueError):
    """Raised when an endpoint argument is outside its allowed range."""

    def __init__(self, argument: str, message: str):
        super().__init__(f"{argument}: {message}")
        self.argument = argument


class RequestCancelledError(RuntimeError):
    pass


class FioResultError(RuntimeError):
    def __init__(self, error: FioError):
        super().__init__(error.message)
        self.error = error
