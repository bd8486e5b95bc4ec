"""Editable text view of the CPU registers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Protocol

REGISTER_COUNT = 16


class Cpu(Protocol):
    reg_r: MutableSequence[int]
    reg_pc: int
    reg_lr: int
    reg_sp: int
    reg_ea: int
    reg_psw: int


def _strtol16(text: str) -> int:
    """Parse a leading hexadecimal integer the way ``strtol`` does; 0 if none."""
    s = text.lstrip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in "0123456789abcdefABCDEF":
        s = s[2:]
    digits = ""
    for ch in s:
        if ch not in "0123456789abcdefABCDEF":
            break
        digits += ch
    return sign * int(digits, 16) if digits else 0


def er_values(registers: Sequence[int]) -> list[int]:
    """Return the eight 16-bit ERn pairs formed from the sixteen Rn registers."""
    return [
        ((high & 0xFF) << 8) | (low & 0xFF)
        for low, high in zip(registers[0::2], registers[1::2])
    ]


class RegisterView:
    """Hex text fields for Rn, PC, LR, SP, EA and PSW, editable while halted."""

    def __init__(self) -> None:
        self.rx: list[str] = ["00"] * REGISTER_COUNT
        self.pc = "0000"
        self.lr = "0000"
        self.sp = "0000"
        self.ea = "0000"
        self.psw = "00"

    def prepare(self, cpu: Cpu) -> None:
        """Fill the text fields from the CPU's current register values."""
        self.rx = [f"{value & 0xFF:02x}" for value in cpu.reg_r[:REGISTER_COUNT]]
        self.pc = f"{cpu.reg_pc & 0xFFFF:04x}"
        self.lr = f"{cpu.reg_lr & 0xFFFF:04x}"
        self.sp = f"{cpu.reg_sp & 0xFFFF:04x}"
        self.ea = f"{cpu.reg_ea & 0xFFFF:04x}"
        self.psw = f"{cpu.reg_psw & 0xFFFF:02x}"

    def update(self, cpu: Cpu) -> None:
        """Write the (possibly edited) text fields back into the CPU registers."""
        for index, text in enumerate(self.rx[:REGISTER_COUNT]):
            cpu.reg_r[index] = _strtol16(text[:2]) & 0xFF
        cpu.reg_pc = _strtol16(self.pc[:4]) & 0xFFFF
        cpu.reg_lr = _strtol16(self.lr[:4]) & 0xFFFF
        cpu.reg_ea = _strtol16(self.ea[:4]) & 0xFFFF
        cpu.reg_sp = _strtol16(self.sp[:4]) & 0xFFFF
        cpu.reg_psw = _strtol16(self.psw[:2]) & 0xFFFF