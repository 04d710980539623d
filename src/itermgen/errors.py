"""
Error types for itermgen.

User input problems derive from ItermgenError and are reported by the CLI.
ContentKindError signals a caller defect and is never caught.
"""

from __future__ import annotations


class ItermgenError(Exception):
    """Base class for user-facing errors."""


class ColorParseError(ItermgenError, ValueError):
    """A color line could not be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class MissingColorError(ColorParseError):
    """No '#' follows the label."""

    def __init__(self, label: str, line_number: int | None = None):
        super().__init__(f"{label} missing hex color definition", line_number)
        self.label = label


class WrongLengthError(ColorParseError):
    """The '#' token is not exactly seven characters long."""

    def __init__(self, token: str, line_number: int | None = None):
        super().__init__(f"Hex color '{token}' not supported, '#RRGGBB' required", line_number)
        self.token = token


class InvalidDigitError(ColorParseError):
    """One of the six digits is outside [0-9a-fA-F]."""

    def __init__(self, token: str, line_number: int | None = None):
        super().__init__(f"Invalid hex color '{token}'", line_number)
        self.token = token


class InputDecodeError(ItermgenError):
    """An input line is not valid in the expected encoding."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"line {line_number}: cannot decode input ({reason})")
        self.line_number = line_number
        self.reason = reason


class ContentKindError(TypeError):
    """A node was mutated through the operation of the other content variant."""
