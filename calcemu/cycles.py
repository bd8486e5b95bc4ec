"""Cycle budgeting that keeps emulation in step with real time."""

from __future__ import annotations


class Cycles:
    """Tracks how many CPU cycles each timer callback should emulate.

    ``get_delta`` is expected to be called once every ``timer_interval``
    milliseconds; it is up to the caller to avoid drift.
    """

    def __init__(self, cycles_per_second: int, timer_interval: int) -> None:
        self.cycles_per_second = cycles_per_second
        self.timer_interval = timer_interval
        self.ticks_now = 0
        self.cycles_emulated = 0

    def reset(self) -> None:
        self.ticks_now = 0
        self.cycles_emulated = 0

    def get_delta(self) -> int:
        """Advance one timer period and return the cycles to emulate in it."""
        self.ticks_now += self.timer_interval
        target = self.ticks_now * self.cycles_per_second // 1000
        delta = target - self.cycles_emulated
        self.cycles_emulated = target
        return delta