# errs/core/errors/base.py
"""
Base error type and the structural error capability.

An object "is an error" for this library when it is a real exception, or
when it structurally exposes both `message` and `stack` (ErrorLike).
Mappings, strings and classes never qualify, even if they carry those keys.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


DEFAULT_MESSAGE = "Unspecified error"


@runtime_checkable
class ErrorLike(Protocol):
    """Anything that carries a message and a stack-like field."""

    message: Any
    stack: Any


def is_error(value: Any) -> bool:
    if isinstance(value, BaseException):
        return True
    if value is None or isinstance(value, (str, bytes, Mapping, type)):
        return False
    return isinstance(value, ErrorLike)


def label_of(err: Any) -> str:
    """Display label: an explicit `name` wins over the class name."""
    if isinstance(err, ErrsError):
        return err.name
    # instance attributes only; builtin members like ImportError.name are not labels
    name = getattr(err, "__dict__", {}).get("name")
    if isinstance(name, str) and name:
        return name
    return type(err).__name__


def message_of(err: Any) -> str:
    message = getattr(err, "message", None)
    if isinstance(message, str):
        return message
    args = getattr(err, "args", None)
    if isinstance(args, tuple) and args:
        return str(args[0])
    return ""


def set_message(err: Any, message: Any) -> None:
    """
    Set the message on any error, keeping `args` in step for exceptions
    so that str(err) reports the same text.
    """
    text = message if isinstance(message, str) else str(message)
    err.message = text
    if isinstance(err, BaseException) and not isinstance(err, ErrsError):
        err.args = (text,)


class ErrsError(Exception):
    """
    The base error manufactured by the factory.

    Carries a `message`, a textual `stack` (header line first, then one
    frame per line, innermost first) and any number of extra attributes.

    `to_json` is an ordinary class attribute: it may be reassigned on the
    class and later restored.
    """

    # class-level fallbacks for subclasses whose __init__ skips super().__init__
    _message: str = DEFAULT_MESSAGE
    _name: Optional[str] = None

    def __init__(self, message: Optional[str] = None, **properties: Any) -> None:
        text = DEFAULT_MESSAGE if message is None else str(message)
        super().__init__(text)
        self._message = text
        self._name = None
        for key, value in properties.items():
            setattr(self, key, value)

        from ..stack import constructed_internally, default_filter
        if constructed_internally(self):
            # the factory attaches the full stack once the instance is populated
            self.stack = default_filter.header(self)
        else:
            self.stack = default_filter.stack_for(self)

    @property
    def message(self) -> str:
        return self._message

    @message.setter
    def message(self, value: Any) -> None:
        self._message = value if isinstance(value, str) else str(value)
        self.args = (self._message,)

    @property
    def name(self) -> str:
        return self._name or type(self).__name__

    @name.setter
    def name(self, value: Any) -> None:
        self._name = None if value is None else str(value)

    def to_json(self) -> Dict[str, Any]:
        from ..serialize import default_to_json
        return default_to_json(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"


__all__ = [
    "DEFAULT_MESSAGE",
    "ErrorLike",
    "ErrsError",
    "is_error",
    "label_of",
    "message_of",
    "set_message",
]
