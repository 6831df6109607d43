"""Range-checked scalar types for MIDI short-message fields.

Each type wraps a plain ``int`` and guarantees it fits the field's bit width:

  Channel           4 bits   0-15
  U7                7 bits   0-127     (data byte)
  ControllerNumber  7 bits   0-127     (controller address, not a magnitude)
  U14              14 bits   0-16383   (MSB/LSB data byte pair)

The public constructor validates.  ``_unchecked`` skips validation and is
reserved for the bit codec, which only calls it with values that were just
masked down to the field width.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Type, TypeVar

from .errors import OutOfRange

LSB_OFFSET = 32
MAX_14_BIT_MSB_CONTROLLER_NUMBER = 31

_T = TypeVar("_T", bound="_BoundedInt")


@dataclass(frozen=True)
class _BoundedInt:
    value: int

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int]

    def __post_init__(self) -> None:
        value = self.value
        if not isinstance(value, int) or isinstance(value, bool):
            raise OutOfRange(type(self).__name__, value, self.MIN, self.MAX)
        if not (self.MIN <= value <= self.MAX):
            raise OutOfRange(type(self).__name__, value, self.MIN, self.MAX)

    @classmethod
    def _unchecked(cls: Type[_T], value: int) -> _T:
        assert cls.MIN <= value <= cls.MAX, f"{cls.__name__} out of range: {value}"
        obj = object.__new__(cls)
        object.__setattr__(obj, "value", value)
        return obj

    def get(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


@dataclass(frozen=True, repr=False)
class Channel(_BoundedInt):
    """MIDI channel 0-15 (displayed to users as 1-16)."""

    MAX: ClassVar[int] = 0x0F


@dataclass(frozen=True, repr=False)
class U7(_BoundedInt):
    """7-bit data value."""

    MAX: ClassVar[int] = 0x7F


@dataclass(frozen=True, repr=False)
class U14(_BoundedInt):
    """14-bit value carried as a high and a low 7-bit half."""

    MAX: ClassVar[int] = 0x3FFF


@dataclass(frozen=True, repr=False)
class ControllerNumber(_BoundedInt):
    """Control Change controller number.

    Controllers 0-31 may send the most significant 7 bits of a 14-bit value;
    the least significant 7 bits then go to controller ``n + 32``.
    """

    MAX: ClassVar[int] = 0x7F

    def corresponding_14_bit_lsb_controller_number(self) -> Optional["ControllerNumber"]:
        if self.value > MAX_14_BIT_MSB_CONTROLLER_NUMBER:
            return None
        return ControllerNumber._unchecked(self.value + LSB_OFFSET)

    def corresponding_14_bit_msb_controller_number(self) -> Optional["ControllerNumber"]:
        lsb_low = LSB_OFFSET
        lsb_high = MAX_14_BIT_MSB_CONTROLLER_NUMBER + LSB_OFFSET
        if not (lsb_low <= self.value <= lsb_high):
            return None
        return ControllerNumber._unchecked(self.value - LSB_OFFSET)

    def can_be_part_of_14_bit_message(self) -> bool:
        return self.value <= MAX_14_BIT_MSB_CONTROLLER_NUMBER + LSB_OFFSET
