from __future__ import annotations


class OutOfRange(ValueError):
    """Raised when a raw integer does not fit the bit width of a value type."""

    def __init__(self, type_name: str, value: object, low: int, high: int) -> None:
        super().__init__(f"{type_name} must be in [{low}, {high}], got {value!r}")
        self.type_name = type_name
        self.value = value
        self.low = low
        self.high = high


class UnpairedControllerNumber(ValueError):
    """Raised when a controller number has no 14-bit LSB partner."""

    def __init__(self, controller_number: int) -> None:
        super().__init__(
            f"controller number {controller_number} has no paired LSB controller "
            "number (14-bit MSB controllers are 0-31)"
        )
        self.controller_number = controller_number
