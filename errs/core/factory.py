# errs/core/factory.py
"""
Error Factory

`create()` dispatches on the shape of its input to one of four explicit
entry points:

- wrap_existing:        an error is returned untouched (same object)
- create_from_message:  a string becomes the message
- create_from_bag:      a property bag is copied onto a new ErrsError
- create_from_type:     a registered (or given) class is instantiated and the bag applied

A string is a type name only when a second argument is supplied:
`create("timeout")` is a message, `create("timeout", {})` is a lookup.

Every new instance gets a transparent stack before it is returned.
Nothing here raises for any input shape; unknown type names fall back
to ErrsError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from ..config import ErrsConfig
from .errors.base import ErrsError, is_error, set_message
from .errors.properties import Properties, apply_properties, resolve_properties
from .merge import ErrorMerger
from .registry import ErrorRegistry, ErrorType
from .stack import StackFilter


logger = logging.getLogger(__name__)


class ErrorFactory:
    """
    Builds and enriches errors.

    Usage:
    ```python
    registry = ErrorRegistry()
    registry.register("named", NamedError)
    factory = ErrorFactory(registry=registry)

    factory.create("disk full")                          # ErrsError("disk full")
    factory.create({"message": "nope", "status": 404})   # ErrsError with .status
    factory.create("named", {"message": "boom"})         # NamedError
    factory.merge(None, {"message": "oh noes!"})         # ErrsError with .stacktrace
    ```
    """

    def __init__(
        self,
        registry: Optional[ErrorRegistry] = None,
        config: Optional[ErrsConfig] = None,
        stack_filter: Optional[StackFilter] = None,
    ) -> None:
        self.config = config or ErrsConfig.default()
        self.registry = registry if registry is not None else ErrorRegistry()
        self.stack_filter = stack_filter or StackFilter(
            hidden_modules=self.config.hidden_modules,
            limit=self.config.stack_limit,
        )
        self._merger = ErrorMerger(self.stack_filter, default_message=self.config.default_message)

    # ---------------------------
    # Dispatch
    # ---------------------------

    def create(self, source: Any = None, properties: Properties = None) -> Any:
        """
        Create an error from any supported input.

        Args:
            source: Message string, property bag, existing error, error class,
                or type name (when `properties` is given)
            properties: Bag applied to a type-name / class lookup

        Returns:
            A new error, or `source` itself when it already is one
        """
        if isinstance(source, str) and properties is not None:
            return self.create_from_type(source, properties)
        if isinstance(source, type) and issubclass(source, BaseException):
            return self.create_from_type(source, properties)
        if is_error(source):
            return self.wrap_existing(source)
        if isinstance(source, str):
            return self.create_from_message(source)
        if source is None:
            return self.create_from_bag(properties)
        if isinstance(source, Mapping) or (callable(source) and not isinstance(source, type)):
            return self.create_from_bag(source)
        return self.create_from_message(str(source))

    # ---------------------------
    # Entry points
    # ---------------------------

    def wrap_existing(self, err: Any) -> Any:
        return err

    def create_from_message(self, message: str) -> ErrsError:
        err = ErrsError(message)
        self.stack_filter.attach(err)
        return err

    def create_from_bag(self, properties: Properties) -> ErrsError:
        return self._populate(ErrsError(), resolve_properties(properties))

    def create_from_type(self, error_type: Union[str, ErrorType], properties: Properties = None) -> Any:
        """
        Instantiate a registered class (by name) or the given class, then apply the bag.

        The class is called with the message first, then with no arguments;
        unknown names and classes that accept neither fall back to ErrsError.
        """
        cls = self.resolve_type(error_type)
        props = resolve_properties(properties)
        err = self._instantiate(cls, props.get("message") or self.config.default_message)
        return self._populate(err, props)

    def resolve_type(self, error_type: Union[str, ErrorType]) -> ErrorType:
        if isinstance(error_type, type):
            return error_type
        cls = self.registry.get(error_type)
        if cls is None:
            logger.debug(f"No error type registered as '{error_type}', using {ErrsError.__name__}")
            return ErrsError
        return cls

    # ---------------------------
    # Merge
    # ---------------------------

    def merge(self, maybe_error: Any, properties: Properties = None) -> Any:
        """See ErrorMerger.merge"""
        return self._merger.merge(maybe_error, properties)

    def _instantiate(self, cls: ErrorType, message: str) -> Any:
        for args in ((message,), ()):
            try:
                return cls(*args)
            except Exception as e:
                logger.debug(f"{cls.__name__}{args!r} failed: {e}")
        logger.debug(f"Cannot construct {cls.__name__}, using {ErrsError.__name__}")
        return ErrsError(message)

    def _populate(self, err: Any, props: Dict[str, Any]) -> Any:
        set_message(err, props.get("message") or self.config.default_message)
        apply_properties(err, props)
        self.stack_filter.attach(err)
        return err

    def __repr__(self) -> str:
        return f"ErrorFactory(registry={self.registry!r}, stack_filter={self.stack_filter!r})"


__all__ = ["ErrorFactory"]
