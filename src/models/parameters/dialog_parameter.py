from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional, TYPE_CHECKING

from services.preferences_store import Namespace, get_default_store

if TYPE_CHECKING:
    from components.forms.form_interface import IForm
    from services.preferences_store import IPreferencesStore


class DialogParameter(ABC):
    """
    Base class for all dialog parameters.

    Parameter = one named value the user edits through a form.
    This class defines:
    - how the current error is stored and queried
    - which preferences store the value is persisted to
    - the dialog and preferences hooks every parameter implements

    A parameter with a non-None error must not be trusted; the host is
    expected to keep the dialog open until every error is cleared.
    """

    def __init__(self, prefs: Optional[IPreferencesStore] = None):
        self._error: Optional[str] = None
        self._prefs = prefs

    # === Error state ===

    def get_error(self) -> Optional[str]:
        """Current validation message, or None if the value is valid"""
        return self._error

    def has_error(self) -> bool:
        return self._error is not None

    def _set_error(self, error: Optional[str]) -> None:
        self._error = error

    # === Preferences ===

    def prefs(self) -> IPreferencesStore:
        """Store injected at construction, or the process-wide default"""
        if self._prefs is not None:
            return self._prefs
        return get_default_store()

    # === Hooks ===

    @abstractmethod
    def get_value(self) -> Any:
        ...

    @abstractmethod
    def add_to_dialog(self, form: IForm) -> None:
        """Register this parameter's field(s) on the form"""
        ...

    @abstractmethod
    def read_from_dialog(self, form: IForm) -> None:
        """Read this parameter's field(s) back, in the order they were added"""
        ...

    @abstractmethod
    def save_to_prefs(self, namespace: Namespace, key: str) -> None:
        ...

    @abstractmethod
    def read_from_prefs(self, namespace: Namespace, key: str) -> None:
        ...
