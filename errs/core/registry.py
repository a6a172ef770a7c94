# errs/core/registry.py
"""
Error Type Registry: lowercase name -> error class.

The registry provides:
- Registration with an explicit name, or with the name taken from the class
- Case-insensitive lookup (get)
- A read-only live view of all registrations (registered)

Rules:
- The most recent registration for a name wins (overwrite is silent)
- There is no removal; entries live as long as the registry does
- No locking: the registry is meant to be used from one thread of control
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Type, Union


ErrorType = Type[Any]

logger = logging.getLogger(__name__)


class ErrorRegistry:
    """
    Maps type names to error classes for `ErrorFactory.create(name, bag)`.

    Usage:
    ```python
    registry = ErrorRegistry()
    registry.register("named", NamedError)
    registry.register(TimeoutError)          # stored as "timeouterror"

    registry.get("NAMED")                    # -> NamedError
    registry.registered["timeouterror"]      # -> TimeoutError
    ```
    """

    def __init__(self) -> None:
        self._types: Dict[str, ErrorType] = {}
        self._view: Mapping[str, ErrorType] = MappingProxyType(self._types)

    def register(self, name_or_type: Union[str, ErrorType], error_type: Optional[ErrorType] = None) -> None:
        """
        Register an error class.

        Args:
            name_or_type: Type name, or the class itself (name inferred from `__name__`)
            error_type: The class, when a name is given first

        Raises:
            ValueError: If the name is empty or the constructor is not a class
        """
        if error_type is None:
            error_type = name_or_type
            name = getattr(error_type, "__name__", None)
        else:
            name = name_or_type

        if not isinstance(error_type, type):
            raise ValueError("error type must be a class")
        if not name or not isinstance(name, str):
            raise ValueError("error type name must be non-empty str")

        key = name.lower()
        previous = self._types.get(key)
        if previous is not None and previous is not error_type:
            logger.debug(f"Error type '{key}' re-registered: {previous.__name__} -> {error_type.__name__}")
        self._types[key] = error_type

    @property
    def registered(self) -> Mapping[str, ErrorType]:
        """Read-only view of name -> class (reflects later registrations)"""
        return self._view

    def get(self, name: Any) -> Optional[ErrorType]:
        """Get class by name (case-insensitive), None if unknown"""
        if not isinstance(name, str):
            return None
        return self._types.get(name.lower())

    def names(self) -> List[str]:
        """Sorted registered names"""
        return sorted(self._types)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"ErrorRegistry(types={self.names()})"


__all__ = ["ErrorType", "ErrorRegistry"]
