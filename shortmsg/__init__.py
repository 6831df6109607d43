"""Codec for MIDI short messages and 14-bit Control Change pairs."""

from .errors import OutOfRange, UnpairedControllerNumber  # noqa: F401
from .values import (  # noqa: F401
    LSB_OFFSET,
    MAX_14_BIT_MSB_CONTROLLER_NUMBER,
    U7,
    U14,
    Channel,
    ControllerNumber,
)
from .bits import (  # noqa: F401
    build_status_byte,
    extract_channel_from_status_byte,
    extract_high_7_bit_value_from_14_bit_value,
    extract_low_7_bit_value_from_14_bit_value,
    join14,
    join_nibbles,
    split14,
    split_nibbles,
)
from .messages import (  # noqa: F401
    CONTROL_CHANGE_TAG,
    MidoMessageFactory,
    RawShortMessage,
    ShortMessageFactory,
    read_control_change,
)
from .control_change_14_bit import ControlChange14BitMessage  # noqa: F401
from . import controller_numbers  # noqa: F401
