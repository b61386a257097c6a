from typing import Iterable, List, Union
from models.enums import LogCategory
from utils.logger import get_logger
from .form_interface import NumericField, parse_number

log = get_logger().for_category(LogCategory.DIALOG)

Answer = Union[float, int, str]


class ScriptedForm:
    """
    Headless form answering reads from a fixed list

    Used for batch runs (values from a macro or command line) and tests.
    String answers go through parse_number(), so "abc" reads as NaN.

    Example:
        form = ScriptedForm(["12", 3.0])
        radius.add_to_dialog(form)
        iterations.add_to_dialog(form)
        radius.read_from_dialog(form)       # 12.0
        iterations.read_from_dialog(form)   # 3.0
    """

    def __init__(self, answers: Iterable[Answer] = ()):
        """
        Args:
            answers: Values returned by read_next_number(), in order
        """
        self.fields: List[NumericField] = []
        self._answers: List[Answer] = list(answers)
        self._read_index = 0

    def add_numeric_field(self, label: str, default: float, digits: int, columns: int, units: str) -> None:
        self.fields.append(NumericField(label, default, digits, columns, units))

    def read_next_number(self) -> float:
        """
        Next scripted answer as a float

        Raises:
            IndexError: If every answer has already been read
        """
        if self._read_index >= len(self._answers):
            raise IndexError(
                f"No scripted answer left (read {self._read_index} of {len(self._answers)})"
            )
        answer = self._answers[self._read_index]
        self._read_index += 1

        value = parse_number(answer) if isinstance(answer, str) else float(answer)
        log.debug("Read scripted answer", index=self._read_index - 1, value=value)
        return value

    def feed(self, *answers: Answer) -> None:
        """Append more answers (e.g. for a second dialog attempt)"""
        self._answers.extend(answers)

    @property
    def remaining(self) -> int:
        return len(self._answers) - self._read_index
