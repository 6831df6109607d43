"""Control-change message shape and the factory capability that builds it.

Wire layout of a control-change short message:

  byte 0  status       0xB0 | channel
  byte 1  controller   0-127
  byte 2  value        0-127

Only this shape is provided.  ``ShortMessageFactory`` is the single operation
the 14-bit composite needs; ``RawShortMessage`` (byte triplet) and
``MidoMessageFactory`` (``mido.Message``) are the two implementations here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable

import mido

from .bits import (
    build_status_byte,
    extract_channel_from_status_byte,
    extract_type_tag_from_status_byte,
)
from .values import U7, Channel, ControllerNumber

CONTROL_CHANGE_TAG = 0xB0
SHORT_MESSAGE_SIZE = 3

_M_co = TypeVar("_M_co", covariant=True)


@runtime_checkable
class ShortMessageFactory(Protocol[_M_co]):
    def control_change(
        self, channel: Channel, controller_number: ControllerNumber, value: U7
    ) -> _M_co:
        ...


@dataclass(frozen=True)
class RawShortMessage:
    status_byte: int
    data_byte_1: int
    data_byte_2: int

    def __post_init__(self) -> None:
        for pos, byte in enumerate((self.status_byte, self.data_byte_1, self.data_byte_2)):
            if not isinstance(byte, int) or isinstance(byte, bool):
                raise ValueError(f"byte at offset {pos} must be an integer")
        if not (0x80 <= self.status_byte <= 0xFF):
            raise ValueError(
                f"invalid status byte 0x{self.status_byte:02X} (must be 0x80-0xFF)"
            )
        for pos, byte in ((1, self.data_byte_1), (2, self.data_byte_2)):
            if not (0 <= byte <= 0x7F):
                raise ValueError(f"invalid data byte 0x{byte:02X} at offset {pos}")

    @classmethod
    def control_change(
        cls, channel: Channel, controller_number: ControllerNumber, value: U7
    ) -> "RawShortMessage":
        return cls(
            status_byte=build_status_byte(CONTROL_CHANGE_TAG, channel),
            data_byte_1=controller_number.get(),
            data_byte_2=value.get(),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "RawShortMessage":
        if len(data) != SHORT_MESSAGE_SIZE:
            raise ValueError(
                f"short message must be {SHORT_MESSAGE_SIZE} bytes, got {len(data)}"
            )
        return cls(*data)

    def to_bytes(self) -> bytes:
        return bytes([self.status_byte, self.data_byte_1, self.data_byte_2])

    def is_control_change(self) -> bool:
        return extract_type_tag_from_status_byte(self.status_byte) == CONTROL_CHANGE_TAG

    def channel(self) -> Channel:
        return extract_channel_from_status_byte(self.status_byte)

    def controller_number(self) -> ControllerNumber:
        self._require_control_change()
        return ControllerNumber(self.data_byte_1)

    def control_value(self) -> U7:
        self._require_control_change()
        return U7(self.data_byte_2)

    def _require_control_change(self) -> None:
        if not self.is_control_change():
            raise ValueError(
                f"not a control change message (status 0x{self.status_byte:02X})"
            )

    def __str__(self) -> str:
        return " ".join(f"{b:02X}" for b in self.to_bytes())


class MidoMessageFactory:
    """Build control changes as ``mido.Message`` objects."""

    @staticmethod
    def control_change(
        channel: Channel, controller_number: ControllerNumber, value: U7
    ) -> mido.Message:
        return mido.Message(
            "control_change",
            channel=channel.get(),
            control=controller_number.get(),
            value=value.get(),
        )


def read_control_change(msg: mido.Message) -> tuple[Channel, ControllerNumber, U7]:
    """Return ``(channel, controller, value)`` from a mido control change."""

    if msg.type != "control_change":
        raise ValueError(f"expected a control_change message, got {msg.type!r}")
    return Channel(msg.channel), ControllerNumber(msg.control), U7(msg.value)
