"""
Variable Store
==============

Tiny BASIC has exactly 26 numeric variables, named A to Z. All of them are
global, exist for the life of the interpreter and hold signed 16-bit
integers. Writes wrap to the 16-bit range the same way the arithmetic
does.
"""

import string


VARIABLE_NAMES = string.ascii_uppercase

INT16_MAX = 0x7FFF


def to_int16(value: int) -> int:
    """Wrap an integer to the signed 16-bit range (two's complement)."""
    value &= 0xFFFF
    return value - 0x10000 if value > INT16_MAX else value


def is_variable_name(char: str) -> bool:
    """True for a single uppercase ASCII letter."""
    return len(char) == 1 and char in VARIABLE_NAMES


class VariableStore:
    """
    Fixed mapping from the letters A-Z to signed 16-bit integers.

    Every variable starts at zero.

    Example:
        >>> store = VariableStore()
        >>> store["A"] = 40000
        >>> store["A"]
        -25536
    """

    def __init__(self):
        self._values = [0] * len(VARIABLE_NAMES)

    def __getitem__(self, name: str) -> int:
        return self._values[ord(name) - ord("A")]

    def __setitem__(self, name: str, value: int) -> None:
        self._values[ord(name) - ord("A")] = to_int16(value)

    def reset(self) -> None:
        """Set every variable back to zero."""
        self._values = [0] * len(VARIABLE_NAMES)

    def as_dict(self) -> dict[str, int]:
        """Snapshot of all 26 variables keyed by name."""
        return dict(zip(VARIABLE_NAMES, self._values))
