"""
Enums shared across the parameter system
"""

from enum import Enum, auto


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    PARAMETER = auto()   # Value changes, bounds checks
    DIALOG = auto()      # Form fields added / read
    PREFS = auto()       # Preferences store reads and writes
    REGISTRY = auto()    # Parameter factory registration
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
