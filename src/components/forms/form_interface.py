# components/forms/form_interface.py
"""
IForm Protocol
==============
Dialog abstraction for parameter input.
Minimal contract for any form backend (scripted, terminal, GUI).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol


class IForm(Protocol):
    """
    Protocol defining the minimal form interface parameters rely on.

    Fields are read back in the order they were added; a parameter that
    adds one field must read exactly one number.

    All implementations must provide:
    - add_numeric_field: register a numeric input
    - read_next_number: value of the next numeric field, NaN if malformed
    """

    def add_numeric_field(
        self,
        label: str,
        default: float,
        digits: int,
        columns: int,
        units: str,
    ) -> None:
        """
        Register a numeric field.

        Args:
            label: Text shown next to the field
            default: Initial value
            digits: Decimal places used to display the value
            columns: Field width in characters
            units: Text shown after the field
        """
        ...

    def read_next_number(self) -> float:
        """Value of the next unread numeric field (NaN if malformed)."""
        ...


@dataclass(frozen=True)
class NumericField:
    """A numeric field as registered on a form"""
    label: str
    default: float
    digits: int
    columns: int
    units: str

    def format_default(self) -> str:
        """Default value rendered with the field's decimal places"""
        return f"{self.default:.{self.digits}f}"


def parse_number(text: str) -> float:
    """
    Parse user text into a float

    Args:
        text: Raw field contents

    Returns:
        Parsed value, or NaN when the text is not a number
    """
    try:
        return float(text.strip())
    except ValueError:
        return float("nan")
