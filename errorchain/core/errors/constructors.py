# errorchain/core/errors/constructors.py
"""
Factories for enriched errors.

Every wrap-style factory returns None when handed None, so results can be
returned unconditionally:

    return wrap(load(), "reading config")

Stacks captured here start at the caller of the factory.
"""

from __future__ import annotations

from typing import Any, Optional

from .chain import errorf, sprintf
from .error import Error
from .stack import Stack


def _callers() -> Stack:
    # skip _callers() and the public factory
    return Stack.capture(skip=2)


def new(description: str) -> Error:
    """Create an Error carrying only a description."""
    return Error(description)


def new_with_stack(description: str) -> Error:
    """Create an Error and capture the caller's stack."""
    return Error(description, stack=_callers())


def newf(format: str, *args: Any) -> Error:
    """
    Create an Error whose description is ``format % args``.

    A single mapping argument fills ``%(key)s`` placeholders.
    """
    return Error(sprintf(format, args))


def wrap(err: Optional[BaseException], description: str) -> Optional[Error]:
    """
    Add context and a stack trace to err.

    Returns:
        A new Error with err as cause, or None if err is None
    """
    if err is None:
        return None
    return Error(description, err, _callers())


def wrapf(err: Optional[BaseException], format: str, *args: Any) -> Optional[Error]:
    """Like wrap(), with a %-formatted description."""
    if err is None:
        return None
    return Error(sprintf(format, args), err, _callers())


def wrap_with_custom_err(
    original_err: Optional[BaseException],
    wrapping_err: BaseException,
) -> Optional[Error]:
    """
    Classify original_err with wrapping_err (usually a predefined error).

    The cause is a composite that wraps wrapping_err and quotes
    original_err's message, so is_(result, wrapping_err) holds.
    """
    if original_err is None:
        return None
    return Error(
        "",
        errorf("%w: %s", wrapping_err, original_err),
        _callers(),
    )


def wrapf_with_custom_err(
    original_err: Optional[BaseException],
    wrapping_err: BaseException,
    format: str,
    *args: Any,
) -> Optional[Error]:
    """
    Like wrap_with_custom_err(), with a %-formatted description.

    Args:
        original_err: Error to classify; None yields None
        wrapping_err: Error the result should match
        format: Description format string
        args: Format arguments
    """
    if original_err is None:
        return None
    return Error(
        sprintf(format, args),
        errorf("%w: %s", wrapping_err, original_err),
        _callers(),
    )


def add_custom_call_stack(err: Optional[BaseException], call_stack: Stack) -> Optional[Error]:
    """
    Attach an existing stack to err.

    The result keeps err's message as its description and err as its cause.
    """
    if err is None:
        return None
    return Error(str(err), err, call_stack)
