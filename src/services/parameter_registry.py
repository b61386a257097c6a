"""
Parameter registry - Name-based factories for dialog parameter types

Parameter classes register themselves with @register_parameter("name");
hosts build them by name without importing the concrete class.
"""

from typing import Any, Callable, Dict, List, Type, TypeVar
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.REGISTRY)

T = TypeVar("T", bound=type)

_registry: Dict[str, type] = {}


def register_parameter(name: str) -> Callable[[T], T]:
    """
    Class decorator registering a parameter type under name

    Raises:
        ValueError: If name is already taken by a different class
    """
    def decorator(cls: T) -> T:
        existing = _registry.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(
                f"Parameter type '{name}' already registered by {existing.__qualname__}"
            )
        _registry[name] = cls
        log.debug("Registered parameter type", name=name, cls=cls.__qualname__)
        return cls
    return decorator


def unregister_parameter(name: str) -> None:
    _registry.pop(name, None)


def get_parameter_class(name: str) -> Type:
    try:
        return _registry[name]
    except KeyError:
        raise ValueError(
            f"Unknown parameter type: {name} (registered: {', '.join(registered_parameters())})"
        )


def create_parameter(name: str, *args: Any, **kwargs: Any) -> Any:
    """
    Build a parameter by registered name

    Example:
        radius = create_parameter("int", 3, "Radius", "px")
    """
    return get_parameter_class(name)(*args, **kwargs)


def registered_parameters() -> List[str]:
    return sorted(_registry)
