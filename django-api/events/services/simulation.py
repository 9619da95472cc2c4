"""Simulated network conditions for the mock catalog.

Latency and random failures are off by default and only exist so the site
can be exercised against slow or flaky backends.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class SimulatedNetwork:
    latency_seconds: float = 0.0
    failure_rate: float = 0.0
    rng: random.Random = field(default_factory=random.Random)
    sleep: Callable[[float], None] = time.sleep

    def __post_init__(self) -> None:
        if self.latency_seconds < 0:
            raise ValueError("Latency cannot be negative")
        if not 0.0 <= self.failure_rate <= 1.0:
            raise ValueError("Failure rate must be between 0 and 1")

    def wait(self) -> None:
        if self.latency_seconds:
            self.sleep(self.latency_seconds)

    def should_fail(self) -> bool:
        return self.failure_rate > 0 and self.rng.random() < self.failure_rate
