# errorchain/core/errors/error.py
"""
Error: an exception enriched with a description, an optional cause and an
optional captured call stack.

Instances are read-only once built; wrapping always creates a new Error.
"""

from __future__ import annotations

from typing import List, Optional

from .chain import errorf, is_, unwrap
from .stack import Stack


class Error(Exception):
    """
    Enriched error value.

    Attributes:
        description: Human-readable context (may be empty)
        cause: Wrapped error, if any
        stack: Captured call stack, if one was requested
    """

    def __init__(
        self,
        description: str = "",
        cause: Optional[BaseException] = None,
        stack: Optional[Stack] = None,
    ):
        super().__init__(description)
        self._description = description
        self._cause = cause
        self._stack = stack
        if cause is not None:
            self.__cause__ = cause

    @property
    def description(self) -> str:
        return self._description

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def stack(self) -> Optional[Stack]:
        return self._stack

    def __str__(self) -> str:
        if self._cause is None:
            return self._description
        return f"{self._description}: {self._cause}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._description!r}, cause={self._cause!r})"

    def __reduce__(self):
        return (type(self), (self._description, self._cause, self._stack))

    # -------- messages --------

    def short_message(self) -> str:
        """
        Description if set, otherwise the cause's message.

        An Error with neither description nor cause yields "".
        """
        if self._description:
            return self._description
        if self._cause is None:
            return ""
        return str(self._cause)

    def root_cause_message(self) -> str:
        """
        Message of the deepest error in the chain, prefixed by the description.

        Falls back to the immediate cause when the cause wraps nothing.
        """
        original = None
        err = unwrap(self._cause)
        while err is not None:
            original = err
            err = unwrap(err)

        if not self._description:
            if original is not None:
                return str(original)
            if self._cause is not None:
                return str(self._cause)
            return ""

        to_use = original if original is not None else self._cause
        if to_use is None:
            return self._description
        return f"{self._description}: {to_use}"

    # -------- chain --------

    def unwrap(self) -> Optional[BaseException]:
        return self._cause

    def get_call_stack(self) -> Optional[List[str]]:
        """
        Formatted call stack, most recent call first, or None without a stack.

        Raises:
            StackFormatError: a frame could not be rendered
        """
        if self._stack is None:
            return None
        return self._stack.format()

    def get_original_predefined_error(self) -> Optional[BaseException]:
        """
        Outermost run of predefined errors below the cause.

        Returns the last predefined error matched before the chain leaves the
        predefined set, or the cause itself when none matches.
        """
        from .predefined import PREDEFINED_ERRORS

        predefined = self._cause
        err = unwrap(self._cause)
        while err is not None:
            if not any(is_(err, sentinel) for sentinel in PREDEFINED_ERRORS):
                return predefined
            predefined = err
            err = unwrap(err)
        return predefined

    # -------- wrapping with this error's description --------

    def wrap(self, err: Optional[BaseException]) -> Optional["Error"]:
        """Wrap err using this error's description; None if err is None or description is empty."""
        if err is None or not self._description:
            return None
        return Error(self._description, err, Stack.capture(skip=1))

    def wrapf(self, format: str, err: Optional[BaseException]) -> Optional[BaseException]:
        """
        Wrap err as wrap() does, then wrap that Error in errorf(format + ": %w").

        The result reads "<format>: <description>: <err>" and unwraps to the
        inner Error. None if err is None or description is empty.
        """
        if err is None or not self._description:
            return None
        inner = Error(self._description, err, Stack.capture(skip=1))
        return errorf(format + ": %w", inner)
