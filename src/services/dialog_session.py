"""Dialog session - Drives a group of parameters through one form"""

from __future__ import annotations

from typing import Callable, List, Sequence, TYPE_CHECKING
from models.enums import LogCategory
from models.errors import ValidationError
from services.preferences_store import Namespace
from utils.logger import get_logger

if TYPE_CHECKING:
    from components.forms.form_interface import IForm
    from models.parameters.dialog_parameter import DialogParameter

log = get_logger().for_category(LogCategory.DIALOG)


class DialogSession:
    """
    Host-side helper for showing, reading and persisting parameters.

    Parameters are added to and read from the form in list order, which
    keeps the sequential add/read pairing forms rely on.

    Example:
        session = DialogSession([iterations, radius], namespace=Deconvolve)
        session.load()
        if session.run(lambda: TerminalForm(), max_attempts=3):
            session.save()
    """

    def __init__(self, parameters: Sequence[DialogParameter], namespace: Namespace):
        """
        Args:
            parameters: Parameters in display order
            namespace: Preferences namespace shared by all parameters
        """
        self.parameters: List[DialogParameter] = list(parameters)
        self.namespace = namespace

    # === Dialog ===

    def show(self, form: IForm) -> None:
        for param in self.parameters:
            param.add_to_dialog(form)
        log.debug("Dialog fields added", count=len(self.parameters))

    def read(self, form: IForm) -> bool:
        """
        Read every parameter back from the form

        Returns:
            True if no parameter holds an error afterwards
        """
        for param in self.parameters:
            param.read_from_dialog(form)

        errors = self.errors()
        if errors:
            log.warn("Dialog input rejected", details=errors)
            return False
        return True

    def run(self, form_factory: Callable[[], IForm], max_attempts: int = 3) -> bool:
        """
        Show and read fresh forms until the input is valid

        Args:
            form_factory: Builds a new, empty form for each attempt
            max_attempts: Number of attempts before giving up

        Returns:
            True once every parameter is valid, False if attempts ran out
        """
        for attempt in range(1, max_attempts + 1):
            form = form_factory()
            self.show(form)
            if self.read(form):
                log.info("Dialog accepted", attempt=attempt)
                return True
        log.warn("Dialog attempts exhausted", attempts=max_attempts)
        return False

    # === Errors ===

    def errors(self) -> List[str]:
        return [p.get_error() for p in self.parameters if p.has_error()]

    def has_errors(self) -> bool:
        return any(p.has_error() for p in self.parameters)

    def raise_for_errors(self) -> None:
        """
        Raises:
            ValidationError: If any parameter holds an error
        """
        errors = self.errors()
        if errors:
            raise ValidationError(errors)

    # === Preferences ===

    def save(self, key_prefix: str = "") -> None:
        """Save each parameter under key_prefix + its label"""
        for param in self.parameters:
            param.save_to_prefs(self.namespace, key_prefix + _key_for(param))
        log.debug("Saved parameters", count=len(self.parameters))

    def load(self, key_prefix: str = "") -> None:
        """Restore each parameter saved with save(key_prefix)"""
        for param in self.parameters:
            param.read_from_prefs(self.namespace, key_prefix + _key_for(param))
        log.debug("Loaded parameters", count=len(self.parameters))


def _key_for(param: DialogParameter) -> str:
    label = getattr(param, "label", None)
    if not label:
        raise ValueError(f"Parameter has no label to key preferences by: {param!r}")
    return label
