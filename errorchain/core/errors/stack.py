# errorchain/core/errors/stack.py
"""
Call stack capture for enriched errors.

A Stack is a snapshot of frame handles taken once, at construction time.
Handles are opaque (code object, line, module) triples; rendering into
display strings happens lazily in format(). Pickling replaces code objects
with the names and file they carry.
"""

from __future__ import annotations

import sys
from types import TracebackType
from typing import Any, Iterator, List, NamedTuple, Optional, Tuple

# Default number of frames kept by a capture.
DEFAULT_DEPTH = 32

_UNKNOWN_NAMES = frozenset({"", "<unknown>"})

_Frame = Tuple[Any, int, str]


class _CodeRef(NamedTuple):
    """Picklable stand-in for the code object of a frame."""
    co_name: str
    co_qualname: str
    co_filename: str


class StackFormatError(ValueError):
    """Raised when a captured frame cannot be rendered."""


class Stack:
    """
    Immutable sequence of captured frames, most recent call first.
    """

    __slots__ = ("_frames",)

    def __init__(self, frames: Tuple[_Frame, ...] = ()):
        self._frames = tuple(frames)

    # -------- capture --------

    @classmethod
    def capture(cls, skip: int = 0, depth: Optional[int] = None) -> "Stack":
        """
        Capture the current call stack.

        Args:
            skip: Number of frames above the caller of capture() to drop.
                With skip=0 the first frame is the function calling capture().
            depth: Maximum number of frames kept (defaults to the configured depth)
        """
        if depth is None:
            depth = _configured_depth()

        try:
            frame = sys._getframe(1 + skip)
        except ValueError:
            # skip reaches past the outermost frame
            return cls()

        frames: List[_Frame] = []
        while frame is not None and len(frames) < depth:
            frames.append((frame.f_code, frame.f_lineno, frame.f_globals.get("__name__", "")))
            frame = frame.f_back
        return cls(tuple(frames))

    @classmethod
    def from_traceback(cls, tb: Optional[TracebackType], depth: Optional[int] = None) -> "Stack":
        """
        Build a stack from an exception traceback.

        Tracebacks run outermost first; the result is reversed so the frame
        that raised comes first, matching capture().
        """
        if depth is None:
            depth = _configured_depth()

        frames: List[_Frame] = []
        while tb is not None:
            frame = tb.tb_frame
            frames.append((frame.f_code, tb.tb_lineno, frame.f_globals.get("__name__", "")))
            tb = tb.tb_next
        frames.reverse()
        return cls(tuple(frames[:depth]))

    # -------- rendering --------

    def format(self) -> List[str]:
        """
        Render frames as "<function>\\n\\t<file>:<line>" strings.

        Stops at the first frame whose function cannot be named.

        Raises:
            StackFormatError: a frame handle could not be rendered
        """
        rendered: List[str] = []
        for code, line, module in self._frames:
            try:
                name = getattr(code, "co_qualname", None) or code.co_name
                filename = code.co_filename
            except AttributeError as exc:
                raise StackFormatError(f"cannot render stack frame {code!r}") from exc

            if name in _UNKNOWN_NAMES:
                break

            function = f"{module}.{name}" if module else name
            rendered.append(f"{function}\n\t{filename}:{line}")
        return rendered

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[str]:
        return iter(self.format())

    def __reduce__(self):
        # code objects do not pickle; keep only what format() reads
        frames = []
        for code, line, module in self._frames:
            try:
                ref = _CodeRef(
                    code.co_name,
                    getattr(code, "co_qualname", None) or code.co_name,
                    code.co_filename,
                )
            except AttributeError as exc:
                raise StackFormatError(f"cannot pickle stack frame {code!r}") from exc
            frames.append((ref, line, module))
        return (type(self), (tuple(frames),))

    def __repr__(self) -> str:
        return f"Stack(frames={len(self._frames)})"


def _configured_depth() -> int:
    from errorchain.config import get_config
    return get_config().stack.depth
