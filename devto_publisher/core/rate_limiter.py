"""Pacing between consecutive API requests."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass(slots=True)
class RateLimiter:
    """Delay policy applied between two remote submissions.

    With ``min_delay == max_delay`` (the default) the wait is fixed; a wider
    range adds uniform jitter. ``sleeper`` is swapped out in tests.
    """

    min_delay: float = 1.0
    max_delay: float = 1.0
    sleeper: Callable[[float], None] = field(default=time.sleep, repr=False)

    def __post_init__(self) -> None:
        if self.max_delay < self.min_delay:
            self.max_delay = self.min_delay

    @classmethod
    def disabled(cls) -> "RateLimiter":
        return cls(min_delay=0.0, max_delay=0.0)

    def compute_delay(self) -> float:
        low = max(self.min_delay, 0.0)
        high = max(self.max_delay, low)
        if high == low:
            return low
        return random.uniform(low, high)

    def sleep(self) -> float:
        delay = self.compute_delay()
        if delay > 0:
            self.sleeper(delay)
        return delay
