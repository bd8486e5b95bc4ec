"""Memory watchpoints that record which instructions read or write an address."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MemBreakpoint:
    """A watched address and the program counters that accessed it."""

    addr: int
    enable_write: bool = False
    records: dict[int, bool] = field(default_factory=dict)


class MemBreakpointList:
    """A list of watched addresses, at most one of which is listened to."""

    def __init__(self) -> None:
        self.breakpoints: list[MemBreakpoint] = []
        self.target: int | None = None

    @property
    def current(self) -> MemBreakpoint | None:
        return None if self.target is None else self.breakpoints[self.target]

    def add(self, addr: int) -> MemBreakpoint:
        bp = MemBreakpoint(addr & 0xFFFF)
        self.breakpoints.append(bp)
        return bp

    def remove(self, index: int) -> None:
        bp = self.breakpoints[index]
        bp.records.clear()
        if self.target == index:
            self.target = None
        elif self.target is not None and self.target > index:
            self.target -= 1
        del self.breakpoints[index]

    def watch(self, index: int, write: bool) -> None:
        """Listen for reads, or writes, of the breakpoint at ``index``."""
        bp = self.breakpoints[index]
        bp.enable_write = write
        bp.records.clear()
        self.target = index

    def try_trigger(self, addr: int, write: bool, pc: int) -> bool:
        """Record an access at ``pc`` if it matches the watched address and kind."""
        bp = self.current
        if bp is None or bp.addr != addr or bp.enable_write != write:
            return False
        bp.records[pc] = write
        return True

    def clear_records(self) -> None:
        bp = self.current
        if bp is not None:
            bp.records.clear()