"""Memory editor state: address layout, cursor movement, input and marked spans."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass

_HEX_DIGITS = "0123456789abcdefABCDEF"
_SIZE_MASK = (1 << 64) - 1

_KEYS = ("up", "down", "left", "right")


@dataclass(frozen=True)
class MarkedSpan:
    """A highlighted run of memory with an optional description."""

    start: int
    length: int
    color: int = 0
    desc: str | None = None


def addr_digits(mem_size: int, base_display_addr: int = 0) -> int:
    """Return the number of hex digits needed for the highest displayed address."""
    n = (base_display_addr + mem_size - 1) & _SIZE_MASK
    count = 0
    while n > 0:
        count += 1
        n >>= 4
    return count


def intersect_range(
    start1: int, end1: int, start2: int, end2: int
) -> tuple[int, int] | None:
    """Return the overlap of two inclusive ranges, or None if they are disjoint."""
    if start2 > end1 or start1 > end2:
        return None
    return max(start1, start2), min(end1, end2)


def span_description(spans: Iterable[MarkedSpan], abs_addr: int) -> str | None:
    """Join the descriptions of every span covering ``abs_addr`` with ", "."""
    descs = [
        span.desc
        for span in spans
        if span.desc is not None and span.start <= abs_addr <= span.start + span.length - 1
    ]
    return ", ".join(descs) if descs else None


def _parse_hex_prefix(text: str) -> int | None:
    """Parse a leading hexadecimal number; None when there is none."""
    s = text.lstrip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in _HEX_DIGITS:
        s = s[2:]
    digits = []
    for ch in s:
        if ch not in _HEX_DIGITS:
            break
        digits.append(ch)
    if not digits:
        return None
    return sign * int("".join(digits), 16)


class MemoryView:
    """Cursor, navigation and editing state of a hex memory editor."""

    def __init__(self, mem_size: int, base_display_addr: int = 0, cols: int = 16) -> None:
        if mem_size < 0:
            raise ValueError("memory size must not be negative")
        self.mem_size = mem_size
        self.base_display_addr = base_display_addr
        self.cols = max(1, cols)
        self.read_only = False
        self.editing_addr: int | None = None
        self.preview_addr: int | None = None
        self.take_focus = False
        self.highlight_min: int | None = None
        self.highlight_max: int | None = None

    @property
    def line_count(self) -> int:
        return (self.mem_size + self.cols - 1) // self.cols

    @property
    def digits(self) -> int:
        return addr_digits(self.mem_size, self.base_display_addr)

    def _select(self, addr: int) -> None:
        self.editing_addr = addr
        self.preview_addr = addr
        self.take_focus = True

    def write_input(self, data: MutableSequence[int], addr: int, text: str) -> int:
        """Write each complete pair of hex characters of ``text`` from ``addr`` on.

        A pair that does not start with a hex digit writes zero. Afterwards the
        cursor moves to the next byte if there is one. Returns the bytes written.
        """
        if self.read_only:
            raise PermissionError("memory view is read-only")
        written = 0
        for i in range(len(text) // 2):
            value = _parse_hex_prefix(text[2 * i : 2 * i + 2])
            data[addr + i] = (value or 0) & 0xFF
            written += 1
        if addr + 1 < self.mem_size:
            self._select(addr + 1)
        return written

    def goto(self, addr_text: str) -> bool:
        """Move the cursor to a displayed hex address; return whether it moved."""
        value = _parse_hex_prefix(addr_text)
        if value is None:
            return False
        self.highlight_min = self.highlight_max = None
        relative = value - self.base_display_addr
        if 0 <= relative < self.mem_size:
            self._select(relative)
            return True
        return False

    def move_cursor(self, key: str) -> int | None:
        """Move the editing cursor with an arrow key: up, down, left or right.

        Returns the new address, or None when the cursor did not move.
        """
        if key not in _KEYS:
            raise ValueError(f"unknown cursor key {key!r}")
        addr = self.editing_addr
        if addr is None or self.read_only:
            return None
        target: int | None = None
        if key == "up" and addr >= self.cols:
            target = addr - self.cols
        elif key == "down" and addr < self.mem_size - self.cols:
            target = addr + self.cols
        elif key == "left" and addr > 0:
            target = addr - 1
        elif key == "right" and addr < self.mem_size - 1:
            target = addr + 1
        if target is not None:
            self._select(target)
        return target

    def line_spans(
        self, spans: Iterable[MarkedSpan], line: int
    ) -> list[tuple[MarkedSpan, int, int]]:
        """Return each span touching a line with its first and last column there."""
        line_start = line * self.cols
        line_end = line_start + self.cols - 1
        result = []
        for span in spans:
            rel_start = span.start - self.base_display_addr
            overlap = intersect_range(
                rel_start, rel_start + span.length - 1, line_start, line_end
            )
            if overlap is None:
                continue
            first, last = overlap
            result.append((span, first % self.cols, last % self.cols))
        return result

    def describe(self, spans: Sequence[MarkedSpan] | None) -> str | None:
        """Describe the spans covering the byte under the editing cursor."""
        if spans is None or self.editing_addr is None:
            return None
        return span_description(spans, self.editing_addr + self.base_display_addr)