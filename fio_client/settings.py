from pathlib import Path
from typing import Annotated
from zoneinfo import ZoneInfo

from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    SecretStr,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import BASE_URL, DEFAULT_TIMEOUT, MIN_REQUEST_INTERVAL
from .token import AccessToken

DEFAULT_LOG_CONFIG = Path(__file__).parent / "logging.json"


def _zone_info(value: str | ZoneInfo) -> ZoneInfo:
    if isinstance(value, ZoneInfo):
        return value
    return ZoneInfo(value)


TimeZone = Annotated[ZoneInfo, BeforeValidator(_zone_info)]


class LogSettings(BaseModel):
    directory: Path = Path("logs")
    config: Path = DEFAULT_LOG_CONFIG
    file_name: str = "fio_client.log"
    level: str | None = None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FIO_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    token: SecretStr
    base_url: str = BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT
    # the bank rejects more than one call per 30 s
    min_request_interval: float = Field(
        default=MIN_REQUEST_INTERVAL, ge=MIN_REQUEST_INTERVAL
    )

    log: LogSettings = LogSettings()
    app_tz: TimeZone = "Europe/Prague"

    @field_validator("token")
    def check_token(cls, value: SecretStr) -> SecretStr:  # noqa
        result = AccessToken.create(value.get_secret_value())
        if result.is_failure:
            raise ValueError(result.error.message)
        return SecretStr(str(result.value))

    @property
    def access_token(self) -> AccessToken:
        return AccessToken(value=self.token.get_secret_value())
