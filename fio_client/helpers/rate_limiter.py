import threading
import time
from typing import Callable

Clock = Callable[[], float]
Sleep = Callable[[float], None]


class RateLimiter:
    """Keeps a minimum interval between the end of one call and the next.

    ``mark()`` records the end of an attempt; ``wait()`` blocks until the
    interval since the last mark has passed.
    """

    def __init__(
        self,
        min_interval: float,
        poll_interval: float = 1.0,
        clock: Clock = time.monotonic,
        sleep: Sleep = time.sleep,
    ):
        if min_interval < 0 or poll_interval <= 0:
            raise ValueError(
                "min_interval must be >= 0 and poll_interval must be > 0"
            )
        self._min_interval = min_interval
        self._poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep
        self._last_call: float | None = None

    @property
    def min_interval(self) -> float:
        return self._min_interval

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    @property
    def last_call(self) -> float | None:
        return self._last_call

    def remaining(self) -> float:
        if self._last_call is None:
            return 0.0
        elapsed = self._clock() - self._last_call
        return max(0.0, self._min_interval - elapsed)

    def wait(self, cancel: threading.Event | None = None) -> bool:
        """Returns False if ``cancel`` was set before the wait finished."""
        while (remaining := self.remaining()) > 0:
            step = min(remaining, self._poll_interval)
            if cancel is None:
                self._sleep(step)
            elif cancel.wait(step):
                return False
        return not (cancel is not None and cancel.is_set())

    def mark(self) -> None:
        self._last_call = self._clock()
