"""
Tick-counted cooldown timer
"""

from __future__ import annotations


def ticks_for(duration_ms: int, tps: int) -> int:
    """Convert a duration to a whole number of simulation ticks (truncated)"""
    return int(duration_ms) * int(tps) // 1000


class Timer:
    """Counts ticks up to a target; ready once the target is reached.

    ``update`` saturates at the target, so a ready timer stays ready until
    ``reset`` is called.
    """

    def __init__(self, target_ticks: int):
        assert target_ticks >= 0, "target_ticks must be non-negative"
        self.current_ticks = 0
        self.target_ticks = target_ticks

    @classmethod
    def from_duration(cls, duration_ms: int, tps: int) -> "Timer":
        return cls(ticks_for(duration_ms, tps))

    def update(self) -> None:
        if self.current_ticks < self.target_ticks:
            self.current_ticks += 1

    def is_ready(self) -> bool:
        return self.current_ticks >= self.target_ticks

    def reset(self) -> None:
        self.current_ticks = 0

    def force_ready(self) -> None:
        """Jump straight to the ready state"""
        self.current_ticks = self.target_ticks

    @property
    def progress(self) -> float:
        """Fraction of the cooldown elapsed, in [0, 1]"""
        if self.target_ticks == 0:
            return 1.0
        return self.current_ticks / self.target_ticks

    def __repr__(self) -> str:
        return f"Timer({self.current_ticks}/{self.target_ticks})"
