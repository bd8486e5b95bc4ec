import pytest

from calcemu.injector import (
    LABEL_INPUT_BUF,
    MEM_EDIT_BASE_ADDR,
    Injector,
    parse_hex_string,
)

RAM_SIZE = 0x2800
INPUT = LABEL_INPUT_BUF - MEM_EDIT_BASE_ADDR


@pytest.fixture
def injector():
    return Injector(bytearray(RAM_SIZE))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0a 1B", b"\x0a\x1b"),
        ("12;34\n56", b"\x12\x56"),
        ("1;2\n34", b"\x34"),
        ("12 ; trailing comment", b"\x12"),
        ("123", b"\x12"),
        ("zz12", b"\x12"),
        ("1 2", b""),
        ("", b""),
    ],
)
def test_parse_hex_string(text, expected):
    assert parse_hex_string(text) == expected


def test_parse_hex_string_round_trip():
    data = bytes(range(256))
    assert parse_hex_string(data.hex()) == data
    assert parse_hex_string(data.hex(" ")) == data


def test_set_math_io(injector):
    injector.ram[0x11E] = 0x55
    injector.set_math_io()
    assert injector.ram[0xD112 - MEM_EDIT_BASE_ADDR] == 0xC4
    assert injector.ram[0xD11E - MEM_EDIT_BASE_ADDR] == 0x00


def test_enter_an_short(injector):
    injector.enter_an(3)
    assert injector.ram[INPUT : INPUT + 5] == bytes((0x31, 0x31, 0x31, 0xFD, 0x20))


def test_enter_an_zero(injector):
    injector.enter_an(0)
    assert injector.ram[INPUT : INPUT + 2] == bytes((0xFD, 0x20))


def test_enter_an_long(injector):
    injector.enter_an(102)
    ram = injector.ram
    assert ram[INPUT : INPUT + 100] == bytes((0x31,)) * 100
    assert ram[INPUT + 100] == 0xA6
    assert ram[INPUT + 101] == 0x31
    assert ram[INPUT + 102 : INPUT + 104] == bytes((0xFD, 0x20))


def test_enter_an_negative(injector):
    with pytest.raises(ValueError):
        injector.enter_an(-1)


def test_load_round_trip(injector):
    data = bytes(range(64))
    injector.load(data)
    assert injector.ram[INPUT : INPUT + 64] == data
    assert injector.data[:64] == data


def test_load_too_long(injector):
    with pytest.raises(ValueError):
        injector.load(bytes(2000))


def test_load_outside_ram():
    small = Injector(bytearray(0x190))
    with pytest.raises(IndexError):
        small.load(bytes(64))
    assert len(small.ram) == 0x190


def test_load_hex_string(injector):
    result = injector.load_hex_string("01 02 ; skip ff\nab")
    assert result == b"\x01\x02\xab"
    assert injector.ram[INPUT : INPUT + 3] == result
    assert injector.data[:3] == result