"""Bit codec: 14-bit halves, nibbles and status bytes."""

import pytest

from shortmsg import U7, U14, Channel
from shortmsg.bits import (
    build_status_byte,
    extract_channel_from_status_byte,
    extract_high_nibble_from_byte,
    extract_low_nibble_from_byte,
    extract_type_tag_from_status_byte,
    join14,
    join_nibbles,
    split14,
    split_nibbles,
)


def test_split14_known_value():
    # 1057 = 0b0001000_0100001
    assert split14(U14(1057)) == (U7(8), U7(33))


@pytest.mark.parametrize(
    "value, high, low",
    [
        (0, 0, 0),
        (127, 0, 127),
        (128, 1, 0),
        (8192, 64, 0),
        (16383, 127, 127),
    ],
)
def test_split14_boundaries(value, high, low):
    assert split14(U14(value)) == (U7(high), U7(low))


def test_join14_inverts_split14_for_all_values():
    for v in range(U14.MAX + 1):
        assert join14(*split14(U14(v))) == U14(v)


def test_split14_inverts_join14():
    for high in (0, 1, 64, 127):
        for low in (0, 1, 64, 127):
            assert split14(join14(U7(high), U7(low))) == (U7(high), U7(low))


def test_split_nibbles():
    assert split_nibbles(0xB5) == (Channel(0xB), Channel(5))
    assert extract_high_nibble_from_byte(0xF0) == Channel(15)
    assert extract_low_nibble_from_byte(0xF0) == Channel(0)


def test_join_nibbles_inverts_split_nibbles_for_all_bytes():
    for b in range(256):
        assert join_nibbles(*split_nibbles(b)) == b


def test_build_status_byte():
    assert build_status_byte(0xB0, Channel(5)) == 0xB5
    assert build_status_byte(0x90, Channel(15)) == 0x9F


def test_extract_channel_from_status_byte():
    assert extract_channel_from_status_byte(0xB5) == Channel(5)
    assert extract_type_tag_from_status_byte(0xB5) == 0xB0


def test_status_byte_round_trip_over_channels():
    for ch in range(16):
        status = build_status_byte(0xB0, Channel(ch))
        assert extract_channel_from_status_byte(status) == Channel(ch)
