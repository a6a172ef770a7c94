# errs/api.py
"""
Module-level API bound to a process-wide default registry and factory.

The default registry is created once and never replaced, so `registered`
stays a valid live view. The default factory is built lazily from code
defaults and can be rebuilt with `configure()`, e.g. `configure(load_config(path))`.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .config import ErrsConfig
from .core.errors.properties import Properties
from .core.factory import ErrorFactory
from .core.registry import ErrorRegistry, ErrorType


_default_registry = ErrorRegistry()
_default_factory: Optional[ErrorFactory] = None

registered: Mapping[str, ErrorType] = _default_registry.registered


def get_default_factory() -> ErrorFactory:
    """
    Get the default factory.

    Lazily initialized on first access from code defaults.
    """
    global _default_factory
    if _default_factory is None:
        _default_factory = ErrorFactory(registry=_default_registry, config=ErrsConfig.default())
    return _default_factory


def configure(config: Optional[ErrsConfig] = None) -> ErrorFactory:
    """
    Rebuild the default factory with `config` (registrations are kept).

    Args:
        config: Configuration to use; None means code defaults
    """
    global _default_factory
    _default_factory = ErrorFactory(
        registry=_default_registry,
        config=config if config is not None else ErrsConfig.default(),
    )
    return _default_factory


def reset_default_factory() -> None:
    """Drop the default factory; the next call rebuilds it. Registrations are kept."""
    global _default_factory
    _default_factory = None


def register(name_or_type: Union[str, ErrorType], error_type: Optional[ErrorType] = None) -> None:
    _default_registry.register(name_or_type, error_type)


def create(source: Any = None, properties: Properties = None) -> Any:
    return get_default_factory().create(source, properties)


def merge(maybe_error: Any, properties: Properties = None) -> Any:
    return get_default_factory().merge(maybe_error, properties)


__all__ = [
    "registered",
    "register",
    "create",
    "merge",
    "configure",
    "get_default_factory",
    "reset_default_factory",
]
