from __future__ import annotations
import math
from typing import Optional, TYPE_CHECKING

from models.enums import LogCategory
from services.parameter_registry import register_parameter
from services.preferences_store import Namespace
from utils.logger import get_logger
from .dialog_parameter import DialogParameter

if TYPE_CHECKING:
    from components.forms.form_interface import IForm
    from services.preferences_store import IPreferencesStore

log = get_logger().for_category(LogCategory.PARAMETER)

# Bounds sentinels meaning "no bound" (range of the preferences integer type)
INT_MIN = -2**31
INT_MAX = 2**31 - 1

# Numeric field formatting on the dialog
DIALOG_DIGITS = 0
DIALOG_COLUMNS = 9


def is_int(value: float) -> bool:
    """
    Check whether a float holds an exact integer.

    Forms only hand back floats, so integrality is validated after the fact.
    round() rounds half to even, which matches "nearest integer" for any
    value that could compare equal.
    """
    return math.isfinite(value) and value == round(value)


@register_parameter("int")
class BoundedIntegerParameter(DialogParameter):
    """
    Integer parameter with optional inclusive [min, max] bounds.

    Out-of-range or malformed input is not rejected; it is recorded as an
    error (see get_error()) so the host can report it and keep the dialog
    open. Bounds default to INT_MIN/INT_MAX, meaning unbounded.

    Example:
        iterations = BoundedIntegerParameter(10, "Iterations")
        iterations.set_bounds(1, INT_MAX)
        iterations.add_to_dialog(form)
        ...
        iterations.read_from_dialog(form)
        if not iterations.has_error():
            run(iterations.get_value())
    """

    def __init__(
        self,
        starting_value: int,
        label: str,
        units: str = "",
        *,
        prefs: Optional[IPreferencesStore] = None,
    ):
        """
        Args:
            starting_value: Initial value (and preferences fallback)
            label: Field label, also used in error messages
            units: Purely cosmetic units shown next to the field
            prefs: Preferences store; defaults to the process-wide store
        """
        super().__init__(prefs)
        self._value = starting_value
        self._label = label
        self._units = units
        self._min = INT_MIN
        self._max = INT_MAX
        self._check_for_errors()

    @property
    def label(self) -> str:
        return self._label

    @property
    def units(self) -> str:
        return self._units

    def get_value(self) -> int:
        """Current value, valid or not; check has_error() before trusting it"""
        return self._value

    def get_min(self) -> int:
        return self._min

    def get_max(self) -> int:
        return self._max

    def set_bounds(self, min_value: int, max_value: int) -> None:
        """
        Set inclusive bounds and revalidate.

        Use INT_MIN / INT_MAX for an open side. The bounds are not checked
        against each other: min_value > max_value makes every value an error.
        """
        self._min = min_value
        self._max = max_value
        self._check_for_errors()

    # === Dialog ===

    def add_to_dialog(self, form: IForm) -> None:
        form.add_numeric_field(self._label, self._value, DIALOG_DIGITS, DIALOG_COLUMNS, self._units)

    def read_from_dialog(self, form: IForm) -> None:
        value = form.read_next_number()
        self._check_for_errors()
        if math.isnan(value):
            self._set_error(f"{self._label} is not a number.")
            log.debug("Rejected dialog input", label=self._label, reason="NaN")
            return
        if not is_int(value):
            self._set_error(f"{self._label} is not an integer.")
            log.debug("Rejected dialog input", label=self._label, value=value)
            return
        self._value = int(value)
        self._check_for_errors()

    # === Preferences ===

    def save_to_prefs(self, namespace: Namespace, key: str) -> None:
        self.prefs().put_int(namespace, key, self._value)

    def read_from_prefs(self, namespace: Namespace, key: str) -> None:
        self._value = self.prefs().get_int(namespace, key, self._value)
        self._check_for_errors()

    # === Validation ===

    def _check_for_errors(self) -> None:
        if self._value < self._min or self._value > self._max:
            if self._min == INT_MIN:
                self._set_error(f"{self._label} must be less than or equal to {self._max}.")
            elif self._max == INT_MAX:
                self._set_error(f"{self._label} must be greater than or equal to {self._min}.")
            else:
                self._set_error(f"{self._label} is not in the range [{self._min}..{self._max}].")
            log.debug("Value out of bounds", label=self._label, value=self._value, error=self.get_error())
            return
        self._set_error(None)

    def __repr__(self) -> str:
        return (
            f"BoundedIntegerParameter(label={self._label!r}, value={self._value}, "
            f"min={self._min}, max={self._max}, error={self.get_error()!r})"
        )
