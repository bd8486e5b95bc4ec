"""Disassembly listing with code breakpoints, single stepping and navigation."""

from __future__ import annotations

import bisect
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from pathlib import Path

from . import logger

_SOURCE_COLUMN = 28
_HEX_PREFIX = re.compile(r"\s*([0-9a-fA-F]+)")


@dataclass(frozen=True)
class CodeElem:
    """One disassembled instruction: its address and its text."""

    segment: int
    offset: int
    source: str = ""

    @property
    def real_pc(self) -> int:
        return real_pc(self.segment, self.offset)


class DebugFlag(IntFlag):
    BREAKPOINT = 1
    STEP = 2
    RET_TRACE = 4


class _BreakState(IntEnum):
    ENABLED = 1
    TRIGGERED = 2
    TEMPORARY = 3


def real_pc(segment: int, offset: int) -> int:
    """Combine a code segment and an offset into a flat program counter."""
    return (segment << 16) | offset


def _parse_line(line: str) -> CodeElem:
    if len(line) < 3 or not line[1].isdigit():
        raise ValueError(f"malformed disassembly line: {line!r}")
    segment = int(line[1])
    match = _HEX_PREFIX.match(line[2:6])
    if match is None:
        raise ValueError(f"malformed address in disassembly line: {line!r}")
    offset = int(match.group(1), 16)
    return CodeElem(segment, offset, line[_SOURCE_COLUMN:])


def parse_disassembly(lines: Iterable[str]) -> list[CodeElem]:
    """Parse listing lines up to the first empty one.

    Each line holds the segment digit at column 1, the four hex digits of the
    offset at columns 2-5 and the instruction text from column 28 on.
    """
    codes = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            break
        codes.append(_parse_line(line))
    return codes


class CodeViewer:
    """Tracks breakpoints and the current position in a disassembly listing."""

    def __init__(self, codes: Iterable[CodeElem]) -> None:
        self.codes = list(codes)
        self._keys = [elem.real_pc for elem in self.codes]
        self.breakpoints: dict[int, _BreakState] = {}
        self.debug_flags = DebugFlag.BREAKPOINT
        self.is_breaked = False
        self.current_break: int | None = None
        self.cur_col = 0
        self.need_roll = False
        self.selected_addr: int | None = None
        self.max_col = 0

    @property
    def max_row(self) -> int:
        return len(self.codes)

    @classmethod
    def from_file(cls, path: str | Path) -> CodeViewer:
        """Load a listing from a disassembly text file."""
        logger.info("Start to read code src ...\n")
        with open(path, encoding="utf-8", errors="replace") as f:
            lines = [line.rstrip("\r\n") for line in f]
        codes = parse_disassembly(lines)
        viewer = cls(codes)
        viewer.max_col = max((len(line) for line in lines[: len(codes)]), default=0)
        logger.info("Read src codes over!\n")
        return viewer

    def lookup(self, segment: int, offset: int) -> tuple[CodeElem, int]:
        """Find the first instruction at or after an address, with its index.

        An address past the end of the listing maps to the first instruction.
        """
        if not self.codes:
            raise LookupError("disassembly listing is empty")
        index = bisect.bisect_left(self._keys, real_pc(segment, offset))
        if index == len(self.codes):
            index = 0
        elem = self.codes[index]
        return CodeElem(elem.segment, elem.offset), index

    def _break_at(self, segment: int, offset: int, pc: int) -> None:
        _, index = self.lookup(segment, offset)
        self.cur_col = index
        self.need_roll = True
        self.current_break = pc
        self.is_breaked = True
        self._select(index)

    def _select(self, index: int) -> None:
        elem = self.codes[index]
        self.selected_addr = elem.segment * 0x10000 + elem.offset

    def try_trigger(self, segment: int, offset: int, bp_mode: bool = True) -> bool:
        """Report whether execution should stop at this address.

        An enabled breakpoint fires once until execution is resumed. Outside
        breakpoint mode, stepping or return tracing stops at every address.
        """
        pc = real_pc(segment, offset)
        if self.breakpoints.get(pc) is _BreakState.ENABLED:
            self.breakpoints[pc] = _BreakState.TRIGGERED
            self._break_at(segment, offset, pc)
            return True
        if not bp_mode and self.debug_flags & (DebugFlag.STEP | DebugFlag.RET_TRACE):
            self.breakpoints[pc] = _BreakState.TEMPORARY
            self._break_at(segment, offset, pc)
            return True
        return False

    def toggle_breakpoint(self, segment: int, offset: int) -> bool:
        """Toggle the breakpoint at an address; return whether it is now set."""
        pc = real_pc(segment, offset)
        if self.breakpoints.get(pc) is _BreakState.ENABLED or pc == self.current_break:
            self.breakpoints.pop(pc, None)
            return False
        self.breakpoints[pc] = _BreakState.ENABLED
        return True

    def jump_to(self, segment: int, offset: int) -> None:
        """Scroll the view to the instruction at or after an address."""
        _, index = self.lookup(segment, offset)
        self.cur_col = index
        self.need_roll = True
        self._select(index)

    def resume(self) -> None:
        """Leave the current break, re-arming or dropping its breakpoint."""
        pc = self.current_break
        if pc is not None and pc in self.breakpoints:
            if self.breakpoints[pc] is _BreakState.TEMPORARY:
                del self.breakpoints[pc]
            else:
                self.breakpoints[pc] = _BreakState.ENABLED
        self.current_break = None
        self.is_breaked = False