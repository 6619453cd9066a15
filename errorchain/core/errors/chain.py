# errorchain/core/errors/chain.py
"""
Standard chain helpers.

Works on any exception chain: links are followed through an ``unwrap()``
method when the link defines one, otherwise through ``__cause__`` (the
explicit ``raise ... from ...`` chain).
"""

from __future__ import annotations

import re
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Type, TypeVar

E = TypeVar("E", bound=BaseException)

# printf-style conversion: flags, width, precision, length modifier, verb
_CONVERSION = re.compile(r"%(?:\(([^)]*)\))?[#0\- +]*(\*|\d+)?(?:\.(\*|\d+))?[hlL]?(.)", re.DOTALL)


class FormattedError(Exception):
    """
    Error built by errorf().

    Carries a rendered message and the errors passed through ``%w``.
    """

    def __init__(self, message: str, wrapped: Tuple[BaseException, ...] = ()):
        super().__init__(message)
        self._message = message
        self._wrapped = tuple(wrapped)
        if self._wrapped:
            self.__cause__ = self._wrapped[0]

    def __str__(self) -> str:
        return self._message

    def unwrap(self) -> Optional[BaseException]:
        """Single wrapped error, None when zero or several were wrapped."""
        if len(self._wrapped) == 1:
            return self._wrapped[0]
        return None

    def unwrap_all(self) -> Tuple[BaseException, ...]:
        return self._wrapped


def sprintf(format: str, args: Tuple[Any, ...]) -> str:
    """
    Apply ``format % args``.

    A single non-empty mapping argument is used for ``%(key)s`` lookups,
    as logging does with its record arguments.
    """
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return format % args[0]
    return format % args


def errorf(format: str, *args: Any) -> FormattedError:
    """
    Format an error message, wrapping every argument consumed by ``%w``.

    ``%w`` renders like ``%s``. Arguments given to ``%w`` that are not
    exceptions are formatted but not wrapped. A single mapping argument
    supplies ``%(key)w`` and ``%(key)s`` values.
    """
    wrapped: List[BaseException] = []
    mapping = args[0] if len(args) == 1 and isinstance(args[0], Mapping) and args[0] else None
    index = 0

    def _convert(match: "re.Match[str]") -> str:
        nonlocal index
        key, width, precision, verb = match.groups()
        if verb == "%":
            return match.group(0)
        if mapping is not None:
            value = mapping.get(key) if key is not None else None
        else:
            index += (width == "*") + (precision == "*")
            value = args[index] if index < len(args) else None
            index += 1
        if verb == "w":
            if isinstance(value, BaseException):
                wrapped.append(value)
            return match.group(0)[:-1] + "s"
        return match.group(0)

    python_format = _CONVERSION.sub(_convert, format)
    return FormattedError(sprintf(python_format, args), tuple(wrapped))


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """Return the next link of err's chain, or None."""
    if err is None:
        return None
    method = getattr(err, "unwrap", None)
    if callable(method):
        return method()
    return err.__cause__


def _children(err: BaseException) -> Tuple[BaseException, ...]:
    many = getattr(err, "unwrap_all", None)
    if callable(many):
        return tuple(many())
    nxt = unwrap(err)
    return (nxt,) if nxt is not None else ()


def _walk(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Depth-first walk over err and every error it wraps."""
    seen = set()
    pending = [err] if err is not None else []
    while pending:
        current = pending.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        pending.extend(reversed(_children(current)))


def is_(err: Optional[BaseException], target: Optional[BaseException]) -> bool:
    """Report whether any error in err's chain is (or equals) target."""
    if err is None or target is None:
        return err is target
    for link in _walk(err):
        if link is target or link == target:
            return True
    return False


def as_(err: Optional[BaseException], cls: Type[E]) -> Optional[E]:
    """Return the first error in err's chain that is an instance of cls."""
    for link in _walk(err):
        if isinstance(link, cls):
            return link
    return None
