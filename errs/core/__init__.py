# errs/core/__init__.py
"""
Core components: base error, registry, stack filter, factory, merger
and JSON projection.

No side effects on import.
"""

from .errors import DEFAULT_MESSAGE, ErrorLike, ErrsError, is_error
from .registry import ErrorRegistry
from .stack import Frame, StackFilter
from .merge import ErrorMerger
from .factory import ErrorFactory
from .serialize import default_to_json, dumps, to_json

__all__ = [
    "DEFAULT_MESSAGE",
    "ErrorLike",
    "ErrsError",
    "is_error",
    "ErrorRegistry",
    "Frame",
    "StackFilter",
    "ErrorMerger",
    "ErrorFactory",
    "default_to_json",
    "dumps",
    "to_json",
]
