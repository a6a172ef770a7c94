# errs/core/errors/properties.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Union


logger = logging.getLogger(__name__)

# A bag may be given as a mapping, a zero-argument callable returning one,
# a bare string (shorthand for {"message": ...}) or None.
Properties = Union[Mapping[str, Any], Callable[[], Mapping[str, Any]], str, None]


def resolve_properties(properties: Any) -> Dict[str, Any]:
    """
    Turn any accepted bag shape into a fresh dict.

    Unsupported shapes resolve to an empty bag rather than raising.
    """
    if properties is None:
        return {}
    if isinstance(properties, str):
        return {"message": properties}
    if callable(properties) and not isinstance(properties, Mapping):
        properties = properties()
        if properties is None:
            return {}
        if isinstance(properties, str):
            return {"message": properties}
    if isinstance(properties, Mapping):
        return {str(key): value for key, value in properties.items()}

    logger.debug(f"Ignoring unsupported property bag of type {type(properties).__name__}")
    return {}


def apply_properties(
    err: Any,
    properties: Mapping[str, Any],
    skip: Iterable[str] = ("message",),
) -> Any:
    """
    Copy every public key of the bag onto the error, overwriting same-named
    attributes.

    Keys starting with "_" would reach the instance's internals (`__class__`,
    `_message`, ...) and are left out, as are attributes the error refuses
    to have set.
    """
    skipped = set(skip)
    for key, value in properties.items():
        if key in skipped:
            continue
        if key.startswith("_"):
            logger.debug(f"Ignoring private property '{key}' for {type(err).__name__}")
            continue
        try:
            setattr(err, key, value)
        except (AttributeError, TypeError) as e:
            logger.debug(f"Cannot set '{key}' on {type(err).__name__}: {e}")
    return err


__all__ = ["Properties", "resolve_properties", "apply_properties"]
