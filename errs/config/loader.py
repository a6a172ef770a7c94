# errs/config/loader.py
"""
Configuration Loader

Loads configuration from a YAML file with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Library works without YAML

Nothing is read implicitly: a file is only loaded when a path is passed,
typically as `errs.configure(load_config(path))`.

Example config.yml:

    default_message: "Something went wrong"
    stack_limit: 20
    hidden_modules:
      - mylib.errors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from errs.core.errors.base import DEFAULT_MESSAGE


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrsConfig:
    """
    errs configuration.

    default_message: Message used when a bag carries none
    stack_limit: Maximum frames kept per captured stack (None = all)
    hidden_modules: Extra module prefixes elided from stacks, on top of errs itself
    """

    default_message: str = DEFAULT_MESSAGE
    stack_limit: Optional[int] = None
    hidden_modules: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.default_message, str):
            raise ValueError("default_message must be str")
        if self.stack_limit is not None:
            if isinstance(self.stack_limit, bool) or not isinstance(self.stack_limit, int):
                raise ValueError("stack_limit must be int or None")
            if self.stack_limit < 0:
                raise ValueError("stack_limit must be >= 0")
        if isinstance(self.hidden_modules, str):
            object.__setattr__(self, "hidden_modules", (self.hidden_modules,))
        else:
            object.__setattr__(self, "hidden_modules", tuple(str(m) for m in self.hidden_modules))

    @classmethod
    def default(cls) -> "ErrsConfig":
        """Default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ErrsConfig":
        """Build from a mapping, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "default_message": self.default_message,
            "stack_limit": self.stack_limit,
            "hidden_modules": list(self.hidden_modules),
        }


def _load_yaml(config_path: Optional[Union[str, Path]]) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if not config_path:
        return None
    path = Path(config_path)
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read errs config {path}: {e}; using defaults")
        return None
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning(f"errs config {path} is not a mapping; using defaults")
        return None
    logger.debug(f"Loaded errs config from {path}")
    return data


def load_config(config_path: Optional[Union[str, Path]] = None) -> ErrsConfig:
    """
    Load errs configuration.

    Args:
        config_path: Path to a YAML file; None gives code defaults

    Returns:
        ErrsConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - Invalid values are reported as a warning, never raised
    """
    data = _load_yaml(config_path)
    if not data:
        return ErrsConfig.default()
    try:
        return ErrsConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid errs config: {e}; using defaults")
        return ErrsConfig.default()


__all__ = ["ErrsConfig", "load_config"]
