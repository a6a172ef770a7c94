# errs/core/merge.py
"""
Merge: normalize any value into an error and layer a property bag onto it.

Whatever comes in, the result is an error carrying a `stacktrace` list.
An error that comes in is mutated in place and returned by identity.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

from .errors.base import DEFAULT_MESSAGE, ErrsError, is_error, set_message
from .errors.properties import Properties, apply_properties, resolve_properties
from .stack import StackFilter, default_filter


logger = logging.getLogger(__name__)


class ErrorMerger:
    def __init__(
        self,
        stack_filter: Optional[StackFilter] = None,
        default_message: str = DEFAULT_MESSAGE,
    ) -> None:
        self.stack_filter = stack_filter or default_filter
        self.default_message = default_message

    def merge(self, maybe_error: Any, properties: Properties = None) -> Any:
        """
        Merge `properties` into `maybe_error`.

        Args:
            maybe_error: An error, or anything else (None, bool, str, a mapping...)
            properties: Bag to layer on; `message` overrides the message

        Returns:
            The normalized error, with `stacktrace` set
        """
        props = resolve_properties(properties)
        err, fresh = self._normalize(maybe_error)

        if "message" in props:
            set_message(err, props["message"])
        apply_properties(err, props)

        if fresh and "stack" not in props:
            self.stack_filter.attach(err)

        stack = getattr(err, "stack", None)
        if not isinstance(stack, str) or not stack:
            stack = self._rebuild_stack(err)
            err.stack = stack

        err.stacktrace = self.stack_filter.split(stack)
        return err

    def _normalize(self, value: Any) -> Tuple[Any, bool]:
        if is_error(value):
            return value, False

        if isinstance(value, str) and value:
            err = ErrsError(value)
        else:
            err = ErrsError(self.default_message)

        if isinstance(value, Mapping):
            carried = resolve_properties(value)
            carried.pop("stack", None)
            if carried.get("message"):
                set_message(err, carried["message"])
            apply_properties(err, carried)

        return err, True

    def _rebuild_stack(self, err: Any) -> str:
        if isinstance(err, BaseException) and err.__traceback__ is not None:
            logger.debug(f"Deriving stack of {type(err).__name__} from its traceback")
            return self.stack_filter.stack_from_traceback(err)
        return self.stack_filter.stack_for(err)


__all__ = ["ErrorMerger"]
