"""Helpers that place prepared input into the calculator's RAM."""

from __future__ import annotations

from collections.abc import Iterator

MEM_EDIT_BASE_ADDR = 0xD000
LABEL_INPUT_BUF = 0xD180
DATA_BUFFER_SIZE = 1024

_MATH_IO_MODE_ADDR = 0xD112
_MATH_IO_MODE_VALUE = 0xC4
_MATH_IO_FLAG_ADDR = 0xD11E

_DIGIT_ONE = 0x31
_AN_SEPARATOR = 0xA6
_AN_MARKER = bytes((0xFD, 0x20))
_AN_SPLIT = 100

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _hex_bytes(text: str) -> Iterator[int]:
    i = 0
    while i + 1 < len(text):
        first, second = text[i], text[i + 1]
        if first == ";" or second == ";":
            newline = text.find("\n", i)
            if newline < 0:
                return
            i = newline + 1
        elif first in _HEX_DIGITS and second in _HEX_DIGITS:
            yield int(first + second, 16)
            i += 2
        else:
            i += 1


def parse_hex_string(text: str) -> bytes:
    """Decode pairs of hex digits, skipping other characters.

    A ``;`` starts a comment that runs to the end of its line; an unterminated
    comment ends the input. A single trailing digit is ignored.
    """
    return bytes(_hex_bytes(text))


class Injector:
    """Writes input sequences into a RAM image that starts at ``base_addr``."""

    def __init__(self, ram: bytearray, base_addr: int = MEM_EDIT_BASE_ADDR) -> None:
        self.ram = ram
        self.base_addr = base_addr
        self.data = bytearray(DATA_BUFFER_SIZE)

    def _write(self, addr: int, data: bytes) -> None:
        start = addr - self.base_addr
        end = start + len(data)
        if start < 0 or end > len(self.ram):
            raise IndexError(
                f"write of {len(data)} bytes at {addr:#06x} falls outside RAM"
            )
        self.ram[start:end] = data

    def set_math_io(self) -> None:
        """Switch the calculator into Math I/O input mode."""
        self._write(_MATH_IO_MODE_ADDR, bytes((_MATH_IO_MODE_VALUE,)))
        self._write(_MATH_IO_FLAG_ADDR, b"\x00")

    def enter_an(self, offset: int) -> None:
        """Fill the input buffer with ``offset`` digits followed by an end marker."""
        if offset < 0:
            raise ValueError("offset must not be negative")
        if offset > _AN_SPLIT:
            self._write(LABEL_INPUT_BUF, bytes((_DIGIT_ONE,)) * _AN_SPLIT)
            self._write(LABEL_INPUT_BUF + _AN_SPLIT, bytes((_AN_SEPARATOR,)))
            self._write(
                LABEL_INPUT_BUF + _AN_SPLIT + 1,
                bytes((_DIGIT_ONE,)) * (offset - _AN_SPLIT),
            )
        else:
            self._write(LABEL_INPUT_BUF, bytes((_DIGIT_ONE,)) * offset)
        self._write(LABEL_INPUT_BUF + offset, _AN_MARKER)

    def load(self, data: bytes) -> None:
        """Copy raw bytes into the input buffer and keep them as the edit data."""
        data = bytes(data)
        if len(data) > DATA_BUFFER_SIZE:
            raise ValueError(f"at most {DATA_BUFFER_SIZE} bytes can be loaded")
        self._write(LABEL_INPUT_BUF, data)
        self.data[: len(data)] = data

    def load_hex_string(self, text: str) -> bytes:
        """Decode a commented hex string, load it, and return the decoded bytes."""
        data = parse_hex_string(text)
        self.load(data)
        return data