from pydantic import BaseModel, ConfigDict, field_validator

from .errors import ErrorKind, FioError
from .result import Result

MIN_TOKEN_LENGTH = 64


def _forbidden_chars(token: str) -> list[str]:
    return [c for c in token if not (c.isascii() and c.isalnum())]


def _check_token(token: str) -> FioError | None:
    if not token:
        return FioError(
            kind=ErrorKind.TOKEN_EMPTY,
            message="Access token can not be empty.",
        )

    if len(token) < MIN_TOKEN_LENGTH:
        return FioError(
            kind=ErrorKind.TOKEN_TOO_SHORT,
            message=(
                f"Access token must have at least {MIN_TOKEN_LENGTH} "
                f"characters, got {len(token)}."
            ),
        )

    if forbidden := _forbidden_chars(token):
        joined = ", ".join(forbidden)
        return FioError(
            kind=ErrorKind.TOKEN_INVALID_CHARACTERS,
            message=f"Access token contains forbidden characters: {joined}",
            detail=joined,
        )

    return None


class AccessToken(BaseModel):
    """Fio API access token: ASCII letters and digits, 64+ characters."""

    model_config = ConfigDict(frozen=True)

    value: str

    @field_validator("value", mode="before")
    def validate_value(cls, value):  # noqa
        value = (value or "").strip() if isinstance(value, str) else value
        if isinstance(value, str) and (error := _check_token(value)):
            raise ValueError(error.message)
        return value

    @classmethod
    def create(cls, raw: str | None) -> Result["AccessToken"]:
        token = (raw or "").strip()
        if error := _check_token(token):
            return Result.failure(error)
        return Result.success(cls(value=token))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"AccessToken('{self.value[:4]}...')"
