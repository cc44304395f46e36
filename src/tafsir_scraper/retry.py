from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from tqdm import tqdm

from .http_client import FetchError

T = TypeVar("T")


class RetryExhaustedError(RuntimeError):
    def __init__(self, label: str, attempts: int, last_error: FetchError) -> None:
        super().__init__(f"{label}: giving up after {attempts} attempts: {last_error}")
        self.label = label
        self.attempts = attempts
        self.last_error = last_error


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-delay bounded retry around one logical unit of work.

    Only `FetchError` is retried. Anything else (invalid input, missing
    markup) propagates on the first attempt.
    """

    attempts: int = 3
    delay_s: float = 1.0
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValueError("attempts must be >= 1")
        if self.delay_s < 0:
            raise ValueError("delay_s must be >= 0")

    def run(self, fn: Callable[[], T], *, label: str) -> T:
        attempt = 1
        while True:
            try:
                return fn()
            except FetchError as e:
                tqdm.write(
                    f"{label}: attempt {attempt}/{self.attempts} failed: {e}",
                    file=sys.stderr,
                )
                if attempt >= self.attempts:
                    raise RetryExhaustedError(label, self.attempts, e) from e
            self.sleep(self.delay_s)
            attempt += 1
