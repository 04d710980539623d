"""
Hex color decoding.

Maps a 6-digit RRGGBB string to three channels normalized to [0, 1].
"""

from __future__ import annotations

from types import MappingProxyType

from .errors import InvalidDigitError, WrongLengthError

# Digit value lookup; characters outside [0-9a-fA-F] are absent.
HEX_DIGITS = MappingProxyType({
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9,
    "a": 10, "b": 11, "c": 12, "d": 13, "e": 14, "f": 15,
    "A": 10, "B": 11, "C": 12, "D": 13, "E": 14, "F": 15,
})

RGB = tuple[float, float, float]


def decode_hex(digits: str) -> RGB:
    """
    Decode RRGGBB (no leading '#') into (red, green, blue).

    Raises InvalidDigitError naming `digits` if any character is not a hex
    digit, and WrongLengthError if there are not exactly six of them.
    """
    if len(digits) != 6:
        raise WrongLengthError(digits)

    values = [HEX_DIGITS.get(ch) for ch in digits]
    if None in values:
        raise InvalidDigitError(digits)

    return (
        (16 * values[0] + values[1]) / 255.0,
        (16 * values[2] + values[3]) / 255.0,
        (16 * values[4] + values[5]) / 255.0,
    )


def encode_hex(rgb: RGB) -> str:
    """Inverse of decode_hex, as '#RRGGBB'."""
    return "#" + "".join(f"{round(255 * channel):02X}" for channel in rgb)
