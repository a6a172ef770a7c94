# errs/config/__init__.py
"""
errs configuration: code defaults with an optional YAML overlay.
"""

from .loader import ErrsConfig, load_config

__all__ = ["ErrsConfig", "load_config"]
