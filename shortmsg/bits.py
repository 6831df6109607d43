"""Bit packing helpers shared by every message shape.

Inputs are already-validated value types, so nothing here can fail: every
result is masked down to its field width before it is wrapped.
"""

from __future__ import annotations

from .values import U7, U14, Channel


def extract_high_7_bit_value_from_14_bit_value(value: U14) -> U7:
    return U7._unchecked((value.get() >> 7) & 0x7F)


def extract_low_7_bit_value_from_14_bit_value(value: U14) -> U7:
    return U7._unchecked(value.get() & 0x7F)


def split14(value: U14) -> tuple[U7, U7]:
    """Return ``(high, low)`` 7-bit halves of a 14-bit value."""

    return (
        extract_high_7_bit_value_from_14_bit_value(value),
        extract_low_7_bit_value_from_14_bit_value(value),
    )


def join14(high: U7, low: U7) -> U14:
    """Inverse of :func:`split14`."""

    return U14._unchecked((high.get() << 7) | low.get())


def extract_high_nibble_from_byte(byte: int) -> Channel:
    return Channel._unchecked((byte >> 4) & 0x0F)


def extract_low_nibble_from_byte(byte: int) -> Channel:
    return Channel._unchecked(byte & 0x0F)


def split_nibbles(byte: int) -> tuple[Channel, Channel]:
    return extract_high_nibble_from_byte(byte), extract_low_nibble_from_byte(byte)


def join_nibbles(high_nibble: Channel, low_nibble: Channel) -> int:
    return (high_nibble.get() << 4) | low_nibble.get()


def build_status_byte(type_tag: int, channel: Channel) -> int:
    """OR a message type tag (high nibble, low nibble zero) with a channel."""

    return type_tag | channel.get()


def extract_channel_from_status_byte(byte: int) -> Channel:
    return extract_low_nibble_from_byte(byte)


def extract_type_tag_from_status_byte(byte: int) -> int:
    return byte & 0xF0
