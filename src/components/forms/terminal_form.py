import sys
from typing import List, Optional, TextIO
from models.enums import LogCategory
from utils.logger import get_logger
from .form_interface import NumericField, parse_number

log = get_logger().for_category(LogCategory.DIALOG)


class TerminalForm:
    """
    Text-mode form (SSH / plain terminal)

    Fields are queued by add_numeric_field(). The first read after new
    fields were added prompts for all of them, one line each:

        Iterations [10]: 12
        Radius [3] px:

    An empty line keeps the default. End of input keeps the defaults of
    every field not answered yet.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        """
        Args:
            stdin: Input stream (defaults to sys.stdin)
            stdout: Prompt stream (defaults to sys.stdout)
        """
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.fields: List[NumericField] = []
        self._values: List[float] = []
        self._read_index = 0

    def add_numeric_field(self, label: str, default: float, digits: int, columns: int, units: str) -> None:
        self.fields.append(NumericField(label, default, digits, columns, units))

    def read_next_number(self) -> float:
        """
        Value of the next field, prompting for pending fields first

        Raises:
            IndexError: If more numbers are read than fields were added
        """
        if len(self._values) < len(self.fields):
            self._prompt(self.fields[len(self._values):])

        if self._read_index >= len(self._values):
            raise IndexError(f"No numeric field left to read (fields: {len(self.fields)})")
        value = self._values[self._read_index]
        self._read_index += 1
        return value

    def reset(self) -> None:
        """Forget all fields so the form can be shown again"""
        self.fields.clear()
        self._values.clear()
        self._read_index = 0

    def _prompt(self, fields: List[NumericField]) -> None:
        for field in fields:
            units = f" {field.units}" if field.units else ""
            self.stdout.write(f"{field.label} [{field.format_default()}]{units}: ")
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                log.debug("End of input, keeping default", label=field.label)
                self.stdout.write("\n")
                self._values.append(float(field.default))
                continue

            text = line.strip()
            if not text:
                self._values.append(float(field.default))
            else:
                self._values.append(parse_number(text))
