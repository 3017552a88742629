import pytest
from hypothesis import given
from hypothesis import strategies as st

from walletfw.util import data_to_hex, read_protobuf_int, uint32_hex


def _encode_varint(value):
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def test_uint32_hex_pads_and_uppercases():
    assert uint32_hex(0xDEADBEEF) == "DEADBEEF"
    assert uint32_hex(0) == "00000000"
    assert uint32_hex(0x1A) == "0000001A"


@pytest.mark.parametrize("bad", [-1, 0x100000000])
def test_uint32_hex_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        uint32_hex(bad)


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_uint32_hex_round_trip(num):
    text = uint32_hex(num)
    assert len(text) == 8
    assert int(text, 16) == num


@given(st.binary(max_size=64))
def test_data_to_hex_round_trip(data):
    text = data_to_hex(data)
    assert text == text.upper()
    assert len(text) == 2 * len(data)
    assert bytes.fromhex(text) == data


def test_read_single_byte():
    assert read_protobuf_int(b"\x05") == (5, 1)


def test_read_two_bytes():
    assert read_protobuf_int(b"\xac\x02\x99") == (300, 2)


def test_read_with_offset():
    data = b"\xff\xff" + _encode_varint(1234)
    assert read_protobuf_int(data, 2) == (1234, len(data))


def test_read_max_uint32():
    assert read_protobuf_int(b"\xff\xff\xff\xff\x0f") == (0xFFFFFFFF, 5)


def test_read_stops_after_five_bytes():
    assert read_protobuf_int(b"\x80\x80\x80\x80\x80\x01") == (0, 5)


def test_read_truncated_raises():
    with pytest.raises(ValueError):
        read_protobuf_int(b"\x80\x80")
    with pytest.raises(ValueError):
        read_protobuf_int(b"", 0)


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_read_round_trip(value):
    encoded = _encode_varint(value)
    assert read_protobuf_int(encoded + b"\x00") == (value, len(encoded))