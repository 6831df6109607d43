"""Named controllers that can carry a 14-bit value, with their LSB partners."""

from __future__ import annotations

from .values import ControllerNumber

BANK_SELECT = ControllerNumber(0)
MODULATION_WHEEL = ControllerNumber(1)
BREATH_CONTROLLER = ControllerNumber(2)
FOOT_CONTROLLER = ControllerNumber(4)
PORTAMENTO_TIME = ControllerNumber(5)
DATA_ENTRY_MSB = ControllerNumber(6)
CHANNEL_VOLUME = ControllerNumber(7)
BALANCE = ControllerNumber(8)
PAN = ControllerNumber(10)
EXPRESSION_CONTROLLER = ControllerNumber(11)
EFFECT_CONTROL_1 = ControllerNumber(12)
EFFECT_CONTROL_2 = ControllerNumber(13)
GENERAL_PURPOSE_CONTROLLER_1 = ControllerNumber(16)
GENERAL_PURPOSE_CONTROLLER_2 = ControllerNumber(17)
GENERAL_PURPOSE_CONTROLLER_3 = ControllerNumber(18)
GENERAL_PURPOSE_CONTROLLER_4 = ControllerNumber(19)

BANK_SELECT_LSB = ControllerNumber(32)
MODULATION_WHEEL_LSB = ControllerNumber(33)
BREATH_CONTROLLER_LSB = ControllerNumber(34)
FOOT_CONTROLLER_LSB = ControllerNumber(36)
PORTAMENTO_TIME_LSB = ControllerNumber(37)
DATA_ENTRY_MSB_LSB = ControllerNumber(38)
CHANNEL_VOLUME_LSB = ControllerNumber(39)
BALANCE_LSB = ControllerNumber(40)
PAN_LSB = ControllerNumber(42)
EXPRESSION_CONTROLLER_LSB = ControllerNumber(43)
EFFECT_CONTROL_1_LSB = ControllerNumber(44)
EFFECT_CONTROL_2_LSB = ControllerNumber(45)
GENERAL_PURPOSE_CONTROLLER_1_LSB = ControllerNumber(48)
GENERAL_PURPOSE_CONTROLLER_2_LSB = ControllerNumber(49)
GENERAL_PURPOSE_CONTROLLER_3_LSB = ControllerNumber(50)
GENERAL_PURPOSE_CONTROLLER_4_LSB = ControllerNumber(51)
