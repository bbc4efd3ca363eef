from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ..errors import ErrorKind, FioError
from ..result import Result


class DateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError(
                f"start {self.start} must not be after end {self.end}"
            )
        return self

    @classmethod
    def create(cls, start: date, end: date) -> Result["DateRange"]:
        try:
            return Result.success(cls(start=start, end=end))
        except ValidationError as e:
            return Result.failure(
                FioError(
                    kind=ErrorKind.INVALID_DATE_RANGE,
                    message=f"Invalid date range {start} - {end}",
                    detail=str(e),
                )
            )

    @classmethod
    def previous_month(cls, today: date | None = None) -> "DateRange":
        today = today or date.today()
        end = today.replace(day=1) - timedelta(days=1)
        return cls(start=end.replace(day=1), end=end)

    def format(self, fmt: str) -> tuple[str, str]:
        return self.start.strftime(fmt), self.end.strftime(fmt)
