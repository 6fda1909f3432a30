import pytest

from acciping.byteutils import clear, hex_print


def test_clear_zeros_prefix_only():
    buffer = bytearray(b"abcdef")
    clear(buffer, 3)
    assert buffer[:3] == bytes(3)
    assert buffer[3:] == b"def"
    assert len(buffer) == 6


def test_clear_whole_buffer():
    buffer = bytearray(b"\x01\x02\x03")
    clear(buffer, len(buffer))
    assert hex_print(buffer) == "[0x0, 0x0, 0x0]"
    assert buffer == bytearray(3)


def test_clear_past_end_raises():
    buffer = bytearray(2)
    with pytest.raises(IndexError):
        clear(buffer, 5)
    assert len(buffer) == 2


def test_hex_print_format():
    assert hex_print(bytes([1, 255])) == "[0x1, 0xff]"
    assert hex_print(b"") == "[]"


def test_hex_print_round_trip():
    data = bytes(range(0, 256, 17))
    text = hex_print(data)
    assert text.startswith("[") and text.endswith("]")
    parsed = bytes(int(part, 16) for part in text[1:-1].split(", "))
    assert parsed == data