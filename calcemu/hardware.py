"""Hardware generations and the timing parameters that follow from them."""

from __future__ import annotations

from enum import IntEnum


class HardwareId(IntEnum):
    """Calculator hardware generation, as given by a model's ``hardware_id``."""

    ES_PLUS = 3
    CLASSWIZ = 4
    CLASSWIZ_II = 5


class EventCode(IntEnum):
    """Codes carried by user events that the emulator posts to the UI loop."""

    FRAME_REQUEST = 0
    EMU_STOPPED = 1


_CYCLES_PER_SECOND = {
    HardwareId.ES_PLUS: 128 * 1024,
    HardwareId.CLASSWIZ: 1024 * 1024 * 2,
    HardwareId.CLASSWIZ_II: 2048 * 1024,
}


def _coerce(hardware_id: int) -> HardwareId:
    try:
        return HardwareId(hardware_id)
    except ValueError:
        raise ValueError(f"Unknown hardware id {hardware_id}") from None


def cycles_per_second(hardware_id: int) -> int:
    """Return the CPU clock rate, in cycles per second, of a hardware generation."""
    return _CYCLES_PER_SECOND[_coerce(hardware_id)]


def timer_interval(hardware_id: int) -> int:
    """Return the emulation timer period in milliseconds for a hardware generation."""
    return 10 if _coerce(hardware_id) is HardwareId.CLASSWIZ_II else 20