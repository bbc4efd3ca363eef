from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import FioError, FioResultError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: either a value or a ``FioError``.

    Recoverable failures (bad status, transport errors, parse errors) are
    returned as failed results instead of being raised.
    """

    value: T | None = None
    error: FioError | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FioError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        if self.error is not None:
            raise FioResultError(self.error)
        return self.value  # type: ignore[return-value]
