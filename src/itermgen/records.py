"""
Color record parsing.

One input line has the shape `Label: #RRGGBB`. The label is everything before
the first ':'; the color token runs from the first '#' after the label to the
end of the line.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidDigitError, MissingColorError, WrongLengthError
from .hexcolor import RGB, decode_hex

TOKEN_LENGTH = 7  # '#' + RRGGBB


@dataclass(frozen=True)
class ColorRecord:
    """A parsed (label, RGB) pair."""
    label: str
    rgb: RGB

    @property
    def red(self) -> float:
        return self.rgb[0]

    @property
    def green(self) -> float:
        return self.rgb[1]

    @property
    def blue(self) -> float:
        return self.rgb[2]


def parse_line(line: str) -> ColorRecord:
    """
    Parse one line (terminator already removed) into a ColorRecord.

    Raises:
        MissingColorError: no '#' after the label.
        WrongLengthError: the '#' token is not exactly 7 characters.
        InvalidDigitError: the token holds a non-hex digit.
    """
    colon = line.find(":")
    label_end = colon if colon >= 0 else len(line)
    label = line[:label_end]

    hash_at = line.find("#", label_end)
    if hash_at < 0:
        raise MissingColorError(label)

    token = line[hash_at:]
    if len(token) != TOKEN_LENGTH:
        raise WrongLengthError(token)

    try:
        rgb = decode_hex(token[1:])
    except InvalidDigitError:
        raise InvalidDigitError(token) from None

    return ColorRecord(label=label, rgb=rgb)
