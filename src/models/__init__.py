"""
Models package - Data models for the parameter system
"""

from .enums import LogLevel, LogCategory
from .errors import ValidationError

__all__ = [
    'LogLevel',
    'LogCategory',
    'ValidationError',
]
