"""
Error reporting for the esh scanner.

The scanner never raises on malformed input; it resolves every problem into a
token and records a ``Diagnostic`` next to it. ``EshError`` is reserved for the
outer surface, such as a source file the CLI cannot read.
"""

from dataclasses import dataclass
from typing import Optional

ERROR = "error"
WARNING = "warning"

# Diagnostic codes
ERROR_CODES = {
    "E001": "Unexpected character",
    "E002": "Malformed number literal",
}


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal note about the input, attached to a scan."""
    message: str
    position: int
    severity: str = ERROR
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    def __str__(self) -> str:
        prefix = self.severity.upper()
        if self.code:
            prefix += f"[{self.code}]"
        result = f"{prefix}: {self.message} (at position {self.position})"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


def unexpected_character(char: str, position: int) -> Diagnostic:
    char_desc = f"'{char}'" if char.isprintable() else f"U+{ord(char):04X}"
    return Diagnostic(
        message=f"{ERROR_CODES['E001']} {char_desc}",
        position=position,
        severity=ERROR,
        code="E001",
        help_text="Remove or replace this character with valid esh syntax.",
    )


def malformed_number(lexeme: str, position: int) -> Diagnostic:
    return Diagnostic(
        message=f"{ERROR_CODES['E002']} '{lexeme}', using 0.0",
        position=position,
        severity=WARNING,
        code="E002",
        help_text="A number may contain at most one decimal point.",
    )


class EshError(Exception):
    """Base class for errors raised outside the scanner."""

    def __init__(self, message, filename=None):
        super().__init__(message)
        self.message = message
        self.filename = filename

    def __str__(self):
        if self.filename:
            return f"File \"{self.filename}\": {self.message}"
        return self.message
