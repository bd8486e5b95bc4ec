import pytest

from calcemu.hardware import EventCode, HardwareId, cycles_per_second, timer_interval


def test_hardware_id_values():
    assert HardwareId(3) is HardwareId.ES_PLUS
    assert HardwareId(4) is HardwareId.CLASSWIZ
    assert HardwareId(5) is HardwareId.CLASSWIZ_II


def test_event_code_order():
    assert EventCode.FRAME_REQUEST < EventCode.EMU_STOPPED
    assert EventCode(0) is EventCode.FRAME_REQUEST


@pytest.mark.parametrize(
    "hw, expected",
    [
        (HardwareId.ES_PLUS, 128 * 1024),
        (HardwareId.CLASSWIZ, 1024 * 1024 * 2),
        (HardwareId.CLASSWIZ_II, 2048 * 1024),
    ],
)
def test_cycles_per_second(hw, expected):
    assert cycles_per_second(hw) == expected
    assert cycles_per_second(int(hw)) == expected


@pytest.mark.parametrize(
    "hw, expected",
    [(HardwareId.ES_PLUS, 20), (HardwareId.CLASSWIZ, 20), (HardwareId.CLASSWIZ_II, 10)],
)
def test_timer_interval(hw, expected):
    assert timer_interval(hw) == expected


@pytest.mark.parametrize("bad", [0, 2, 6, 99])
def test_unknown_hardware_id(bad):
    with pytest.raises(ValueError, match="Unknown hardware id"):
        cycles_per_second(bad)
    with pytest.raises(ValueError, match="Unknown hardware id"):
        timer_interval(bad)