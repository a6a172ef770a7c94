# errs/core/serialize.py
"""
JSON projection of errors.

`ErrsError.to_json` is the overridable slot; `default_to_json` is what it
does unless a caller swaps it. `to_json()` / `dumps()` work for any error,
including plain exceptions that never passed through the factory.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from .errors.base import is_error, label_of, message_of


def default_to_json(err: Any) -> Dict[str, Any]:
    """
    Project an error onto a plain dict.

    Always contains `message`, `stack`, `arguments` and `type`; every public
    instance attribute follows.
    """
    data: Dict[str, Any] = {
        "message": message_of(err),
        "stack": getattr(err, "stack", None),
        "arguments": getattr(err, "arguments", None),
        "type": label_of(err),
    }
    for key, value in getattr(err, "__dict__", {}).items():
        if key.startswith("_") or key in data:
            continue
        data[key] = value
    return data


def to_json(err: Any) -> Any:
    method = getattr(err, "to_json", None)
    if callable(method):
        return method()
    return default_to_json(err)


def _encode_default(value: Any) -> Any:
    if is_error(value):
        return to_json(value)
    return repr(value)


def dumps(err: Any, **kwargs: Any) -> str:
    """JSON text for an error; nested errors are projected, anything else unserializable is repr()'d"""
    kwargs.setdefault("default", _encode_default)
    return json.dumps(to_json(err), **kwargs)


__all__ = ["default_to_json", "to_json", "dumps"]
