# errs/core/errors/__init__.py
"""
Core error types for errs.

This package defines:
- The base error manufactured by the factory
- The structural "is this an error" capability
- Property bag resolution and the copy rule

No side effects on import.
"""

from .base import (
    DEFAULT_MESSAGE,
    ErrorLike,
    ErrsError,
    is_error,
    label_of,
    message_of,
    set_message,
)
from .properties import Properties, apply_properties, resolve_properties

__all__ = [
    "DEFAULT_MESSAGE",
    "ErrorLike",
    "ErrsError",
    "is_error",
    "label_of",
    "message_of",
    "set_message",
    "Properties",
    "apply_properties",
    "resolve_properties",
]
