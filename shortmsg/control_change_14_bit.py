"""14-bit Control Change messages.

A plain control change only carries 7 bits.  MIDI sends a 14-bit controller
value as two control changes in a row on the same channel:

  1. MSB controller ``n`` (0-31)   -> high 7 bits
  2. LSB controller ``n + 32``      -> low 7 bits

The MSB message always goes first so a receiver that applies messages in
arrival order ends up with the full value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeVar

from .bits import split14
from .errors import UnpairedControllerNumber
from .messages import RawShortMessage, ShortMessageFactory
from .values import U14, Channel, ControllerNumber

logger = logging.getLogger(__name__)

M = TypeVar("M")


@dataclass(frozen=True, init=False, repr=False)
class ControlChange14BitMessage:
    """One logical 14-bit controller change.

    >>> msg = ControlChange14BitMessage(Channel(5), ControllerNumber(2), U14(1057))
    >>> msg.lsb_controller_number()
    ControllerNumber(34)
    >>> [str(m) for m in msg.to_messages()]
    ['B5 02 08', 'B5 22 21']
    """

    _channel: Channel
    _msb_controller_number: ControllerNumber
    _value: U14

    def __init__(
        self, channel: Channel, msb_controller_number: ControllerNumber, value: U14
    ) -> None:
        for name, got, expected in (
            ("channel", channel, Channel),
            ("msb_controller_number", msb_controller_number, ControllerNumber),
            ("value", value, U14),
        ):
            if not isinstance(got, expected):
                raise TypeError(
                    f"{name} must be {expected.__name__}, got {type(got).__name__}"
                )
        if msb_controller_number.corresponding_14_bit_lsb_controller_number() is None:
            raise UnpairedControllerNumber(msb_controller_number.get())
        object.__setattr__(self, "_channel", channel)
        object.__setattr__(self, "_msb_controller_number", msb_controller_number)
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return (
            f"ControlChange14BitMessage(channel={self._channel.get()}, "
            f"msb_controller_number={self._msb_controller_number.get()}, "
            f"value={self._value.get()})"
        )

    def channel(self) -> Channel:
        return self._channel

    def msb_controller_number(self) -> ControllerNumber:
        return self._msb_controller_number

    def lsb_controller_number(self) -> ControllerNumber:
        lsb = self._msb_controller_number.corresponding_14_bit_lsb_controller_number()
        assert lsb is not None  # checked in __init__
        return lsb

    def value(self) -> U14:
        return self._value

    def to_messages(
        self, factory: ShortMessageFactory[M] = RawShortMessage
    ) -> tuple[M, M]:
        """Return ``(msb_message, lsb_message)`` built by ``factory``.

        The order is part of the wire contract; send them as returned.
        """

        high, low = split14(self._value)
        logger.debug(
            "14-bit CC ch=%d msb=%d lsb=%d value=%d -> high=%d low=%d",
            self._channel.get(),
            self._msb_controller_number.get(),
            self.lsb_controller_number().get(),
            self._value.get(),
            high.get(),
            low.get(),
        )
        return (
            factory.control_change(self._channel, self._msb_controller_number, high),
            factory.control_change(self._channel, self.lsb_controller_number(), low),
        )

    def to_bytes(self) -> bytes:
        msb_msg, lsb_msg = self.to_messages(RawShortMessage)
        return msb_msg.to_bytes() + lsb_msg.to_bytes()
