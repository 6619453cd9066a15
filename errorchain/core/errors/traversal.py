# errorchain/core/errors/traversal.py
"""
Stack-aware lookups over an error chain.

Both walks start at the given error and follow unwrap() towards the
deepest cause. Links that are not Error instances are passed over.
"""

from __future__ import annotations

from typing import Optional

from .chain import unwrap
from .error import Error


def find_original_error_with_stack(err: Optional[BaseException]) -> Optional[Error]:
    """
    Return the innermost Error in the chain that carries a call stack.
    """
    last_with_stack = None

    current = err
    while current is not None:
        if isinstance(current, Error) and current.stack is not None:
            last_with_stack = current
        current = unwrap(current)

    return last_with_stack


def find_first_error_with_stack(err: Optional[BaseException]) -> Optional[Error]:
    """
    Return the first Error in the chain, whether or not it has a stack.
    """
    current = err
    while current is not None:
        if isinstance(current, Error):
            return current
        current = unwrap(current)

    return None
