import pytest

from calcemu.mem_breakpoint import MemBreakpoint, MemBreakpointList


@pytest.fixture
def bps():
    bp_list = MemBreakpointList()
    bp_list.add(0xD180)
    bp_list.add(0xD000)
    return bp_list


def test_add_masks_to_16_bits():
    bp_list = MemBreakpointList()
    bp = bp_list.add(0x1D180)
    assert bp == MemBreakpoint(0xD180)
    assert bp_list.breakpoints == [bp]


def test_no_target_never_triggers(bps):
    assert bps.try_trigger(0xD180, False, 0x10) is False
    assert all(not bp.records for bp in bps.breakpoints)


def test_watch_reads_records_pc(bps):
    bps.watch(0, write=False)
    assert bps.try_trigger(0xD180, False, 0x12345) is True
    assert bps.breakpoints[0].records == {0x12345: False}


def test_watch_ignores_other_kind_and_address(bps):
    bps.watch(0, write=True)
    assert bps.try_trigger(0xD180, False, 0x10) is False
    assert bps.try_trigger(0xD000, True, 0x10) is False
    assert bps.try_trigger(0xD180, True, 0x10) is True
    assert bps.breakpoints[0].records == {0x10: True}


def test_watch_clears_previous_records(bps):
    bps.watch(0, write=False)
    bps.try_trigger(0xD180, False, 0x10)
    bps.watch(0, write=True)
    assert bps.breakpoints[0].records == {}
    assert bps.breakpoints[0].enable_write is True


def test_clear_records(bps):
    bps.watch(1, write=False)
    bps.try_trigger(0xD000, False, 0x20)
    bps.clear_records()
    assert bps.breakpoints[1].records == {}
    assert bps.target == 1


def test_remove_target_stops_listening(bps):
    bps.watch(0, write=False)
    bps.remove(0)
    assert bps.target is None
    assert [bp.addr for bp in bps.breakpoints] == [0xD000]
    assert bps.try_trigger(0xD000, False, 0x10) is False


def test_remove_before_target_keeps_same_breakpoint(bps):
    bps.watch(1, write=False)
    bps.remove(0)
    assert bps.current.addr == 0xD000
    assert bps.try_trigger(0xD000, False, 0x30) is True


def test_watch_bad_index_raises(bps):
    with pytest.raises(IndexError):
        bps.watch(5, write=False)