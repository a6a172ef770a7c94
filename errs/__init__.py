# errs/__init__.py
"""
errs - build, enrich and serialize errors

Create errors from strings, property bags or registered types:
    >>> import errs
    >>> err = errs.create("disk full")
    >>> err = errs.create({"message": "not found", "status": 404})
    >>> err.status
    404

Registered types:
    >>> class NamedError(errs.ErrsError):
    ...     pass
    >>> errs.register("named", NamedError)
    >>> isinstance(errs.create("named", {"message": "boom", "code": 7}), NamedError)
    True

Merge properties into anything (None, strings, exceptions...):
    >>> err = errs.merge(None, {"message": "oh noes!"})
    >>> isinstance(err.stacktrace, list)
    True

Stacks never show frames from inside errs itself.

JSON:
    >>> errs.to_json(err)["message"]
    'oh noes!'
"""

__version__ = "0.1.0"

from .core import (
    DEFAULT_MESSAGE,
    ErrorFactory,
    ErrorLike,
    ErrorMerger,
    ErrorRegistry,
    ErrsError,
    Frame,
    StackFilter,
    default_to_json,
    dumps,
    is_error,
    to_json,
)
from .config import ErrsConfig, load_config
from .api import (
    configure,
    create,
    get_default_factory,
    merge,
    register,
    registered,
    reset_default_factory,
)

__all__ = [
    "__version__",

    # Module-level API
    "register",
    "registered",
    "create",
    "merge",
    "to_json",
    "dumps",
    "configure",
    "get_default_factory",
    "reset_default_factory",

    # Types
    "DEFAULT_MESSAGE",
    "ErrsError",
    "ErrorLike",
    "is_error",
    "ErrorRegistry",
    "ErrorFactory",
    "ErrorMerger",
    "StackFilter",
    "Frame",
    "default_to_json",

    # Config
    "ErrsConfig",
    "load_config",
]
