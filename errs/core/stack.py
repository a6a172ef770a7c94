# errs/core/stack.py
"""
Stack capture with library frames elided.

Frames are tagged with the module they execute in at capture time and
filtered on that tag, so the result does not depend on where or how the
package is installed. Text stacks that arrive from outside can only be
filtered by location, so `split()` falls back to matching source paths.

Stack text layout:

    <label>: <message>
        File "/app/service.py", line 12, in handle
        File "/app/main.py", line 40, in main

The header comes first, frames follow innermost first.
"""

from __future__ import annotations

import inspect
import os
import sys
import traceback
from dataclasses import dataclass
from types import FrameType, TracebackType
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .errors.base import label_of, message_of


PACKAGE = __name__.split(".")[0]
PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

FRAME_INDENT = "    "


@dataclass(frozen=True)
class Frame:
    """
    One captured call-stack frame.

    Attributes:
        module: Value of `__name__` in the frame's globals (origin tag)
        filename: Source file of the executing code
        lineno: Current line number
        function: Name of the executing function
    """
    module: str
    filename: str
    lineno: int
    function: str

    @classmethod
    def from_frame(cls, frame: FrameType, lineno: int) -> "Frame":
        code = frame.f_code
        return cls(
            module=frame.f_globals.get("__name__") or "",
            filename=code.co_filename,
            lineno=lineno,
            function=code.co_name,
        )

    def describe(self) -> str:
        return f'File "{self.filename}", line {self.lineno}, in {self.function}'


class StackFilter:
    """
    Captures stacks and removes frames that belong to this library
    (plus any extra `hidden_modules`, for wrappers that want to be
    transparent too).
    """

    def __init__(self, hidden_modules: Sequence[str] = (), limit: Optional[int] = None) -> None:
        """
        Args:
            hidden_modules: Extra module prefixes whose frames are elided
            limit: Maximum number of frames kept (None = all)
        """
        extra = tuple(m for m in hidden_modules if m and m != PACKAGE)
        self.hidden_modules: Tuple[str, ...] = (PACKAGE,) + extra
        self.limit = limit

    # ---------------------------
    # Frame level (tag based)
    # ---------------------------

    def is_internal(self, frame: Frame) -> bool:
        module = frame.module
        return any(module == name or module.startswith(name + ".") for name in self.hidden_modules)

    def capture(self) -> List[Frame]:
        """Capture the current call stack, innermost first, library frames removed."""
        current = inspect.currentframe()
        try:
            frames = [Frame.from_frame(f, lineno) for f, lineno in traceback.walk_stack(current)]
        finally:
            del current
        return self._keep(frames)

    def from_traceback(self, tb: Optional[TracebackType]) -> List[Frame]:
        """Frames of a raised exception's traceback, innermost first."""
        frames = [Frame.from_frame(f, lineno) for f, lineno in traceback.walk_tb(tb)]
        frames.reverse()
        return self._keep(frames)

    def _keep(self, frames: Iterable[Frame]) -> List[Frame]:
        kept = [frame for frame in frames if not self.is_internal(frame)]
        if self.limit is not None:
            kept = kept[: self.limit]
        return kept

    # ---------------------------
    # Text level
    # ---------------------------

    @staticmethod
    def header(err: Any) -> str:
        label = label_of(err)
        message = message_of(err)
        return f"{label}: {message}" if message else label

    @staticmethod
    def format(header: str, frames: Sequence[Frame]) -> str:
        lines = [header]
        lines.extend(FRAME_INDENT + frame.describe() for frame in frames)
        return "\n".join(lines)

    def stack_for(self, err: Any) -> str:
        return self.format(self.header(err), self.capture())

    def stack_from_traceback(self, err: BaseException) -> str:
        return self.format(self.header(err), self.from_traceback(err.__traceback__))

    def attach(self, err: Any) -> str:
        """Capture a fresh transparent stack and store it on `err.stack`."""
        err.stack = self.stack_for(err)
        return err.stack

    def is_internal_line(self, line: str) -> bool:
        return any(location in line for location in self._hidden_locations())

    def split(self, stack: str) -> List[str]:
        """
        Derive the frame list from stack text: header dropped, blank and
        library lines removed, order kept.
        """
        frames = []
        for line in stack.splitlines()[1:]:
            text = line.strip()
            if text and not self.is_internal_line(line):
                frames.append(text)
        return frames

    def _hidden_locations(self) -> List[str]:
        locations = [PACKAGE_DIR + os.sep]
        for name in self.hidden_modules[1:]:
            module = sys.modules.get(name)
            if module is None:
                continue
            paths = getattr(module, "__path__", None)
            if paths:
                locations.extend(os.path.abspath(p) + os.sep for p in paths)
            elif getattr(module, "__file__", None):
                locations.append(os.path.abspath(module.__file__))
        return locations

    def __repr__(self) -> str:
        return f"StackFilter(hidden_modules={list(self.hidden_modules)}, limit={self.limit})"


def constructed_internally(instance: Any) -> bool:
    """
    True when `instance` is being constructed by library code.

    The constructor frames of `instance` (its own `__init__` and those of
    any subclasses) are skipped; the first frame after them decides. The
    factory and the merger attach a stack once the instance is populated,
    so errors they build need no capture of their own.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        while (
            caller is not None
            and caller.f_code.co_name == "__init__"
            and caller.f_locals.get("self") is instance
        ):
            caller = caller.f_back
        if caller is None:
            return False
        module = caller.f_globals.get("__name__") or ""
        return module == PACKAGE or module.startswith(PACKAGE + ".")
    finally:
        del frame, caller


# Used by errors constructed directly, outside of any factory
default_filter = StackFilter()


__all__ = [
    "Frame",
    "StackFilter",
    "constructed_internally",
    "PACKAGE",
    "PACKAGE_DIR",
    "default_filter",
]
