"""Services layer"""

from .preferences_store import (
    IPreferencesStore,
    MemoryPreferencesStore,
    JsonPreferencesStore,
    get_default_store,
    set_default_store,
    namespace_name,
)
from .parameter_registry import create_parameter, register_parameter, registered_parameters
from .dialog_session import DialogSession

__all__ = [
    "IPreferencesStore",
    "MemoryPreferencesStore",
    "JsonPreferencesStore",
    "get_default_store",
    "set_default_store",
    "namespace_name",
    "create_parameter",
    "register_parameter",
    "registered_parameters",
    "DialogSession",
]
