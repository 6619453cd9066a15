# errorchain/core/errors/predefined.py
"""
Predefined errors.

Ten process-wide sentinels used to classify failures across boundaries.
They carry only a description and are compared by identity; wrap them with
wrap_with_custom_err() rather than raising them directly.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, Optional, Tuple

from .chain import is_
from .error import Error


# ---- sentinels (stable public contract) ----
ERR_BAD_REQUEST: Final[Error] = Error("bad request")                      # HTTP 400
ERR_UNAUTHORIZED: Final[Error] = Error("user unauthorized")               # HTTP 401
ERR_REGISTRATION_REQUIRED: Final[Error] = Error("registration required")  # HTTP 401
ERR_PAYMENT_ERROR: Final[Error] = Error("payment error")                  # HTTP 402
ERR_FORBIDDEN_ACTION: Final[Error] = Error("forbidden")                   # HTTP 403
ERR_NOT_FOUND: Final[Error] = Error("entity not found")                   # HTTP 404
ERR_CONFLICT: Final[Error] = Error("conflict request")                    # HTTP 409
ERR_PRECONDITION_FAILED: Final[Error] = Error("precondition failed")      # HTTP 412
ERR_VALIDATION: Final[Error] = Error("validation failed")                 # HTTP 422
ERR_INTERNAL_SERVER_ERROR: Final[Error] = Error("internal server error")  # HTTP 500


PREDEFINED_ERRORS: Final[Tuple[Error, ...]] = (
    ERR_BAD_REQUEST,
    ERR_UNAUTHORIZED,
    ERR_REGISTRATION_REQUIRED,
    ERR_PAYMENT_ERROR,
    ERR_FORBIDDEN_ACTION,
    ERR_NOT_FOUND,
    ERR_CONFLICT,
    ERR_PRECONDITION_FAILED,
    ERR_VALIDATION,
    ERR_INTERNAL_SERVER_ERROR,
)

STATUS_CODES: Final[Mapping[Error, int]] = MappingProxyType({
    ERR_BAD_REQUEST: 400,
    ERR_UNAUTHORIZED: 401,
    ERR_REGISTRATION_REQUIRED: 401,
    ERR_PAYMENT_ERROR: 402,
    ERR_FORBIDDEN_ACTION: 403,
    ERR_NOT_FOUND: 404,
    ERR_CONFLICT: 409,
    ERR_PRECONDITION_FAILED: 412,
    ERR_VALIDATION: 422,
    ERR_INTERNAL_SERVER_ERROR: 500,
})


def is_predefined(err: Optional[BaseException]) -> bool:
    """True when err is one of the sentinels above (identity, no chain walk)."""
    return any(err is sentinel for sentinel in PREDEFINED_ERRORS)


def http_status(err: Optional[BaseException], default: Optional[int] = None) -> Optional[int]:
    """
    Map err to the HTTP status of the predefined error it carries.

    Enriched errors are resolved through get_original_predefined_error();
    any other chain is searched for the first sentinel it contains.
    """
    if err is None:
        return default

    if isinstance(err, Error):
        resolved = err.get_original_predefined_error()
        if is_predefined(resolved):
            return STATUS_CODES[resolved]

    for sentinel in PREDEFINED_ERRORS:
        if is_(err, sentinel):
            return STATUS_CODES[sentinel]
    return default
