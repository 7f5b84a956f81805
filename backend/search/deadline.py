"""
Per-turn time budget.
"""

import time
from typing import Optional

from domain.errors import DeadlineExceeded


class Deadline:
    """
    Wall-clock budget for one move decision, measured on the monotonic clock.

    A budget of None never expires.
    """

    def __init__(self, budget_ms: Optional[float] = None):
        self.budget_ms = budget_ms
        self.started = time.monotonic()

    def elapsed_ms(self) -> float:
        return (time.monotonic() - self.started) * 1000.0

    def remaining_ms(self) -> Optional[float]:
        if self.budget_ms is None:
            return None
        return self.budget_ms - self.elapsed_ms()

    def expired(self) -> bool:
        remaining = self.remaining_ms()
        return remaining is not None and remaining <= 0

    def check(self) -> None:
        """Raise DeadlineExceeded once the budget is spent."""
        if self.expired():
            raise DeadlineExceeded(
                f"Move budget of {self.budget_ms:.0f}ms spent after {self.elapsed_ms():.1f}ms"
            )
