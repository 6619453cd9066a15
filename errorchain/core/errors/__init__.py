# errorchain/core/errors/__init__.py
"""
Core error types for errorchain.

This package defines the components responsible for:
- Representing enriched errors (description, cause, call stack)
- Classifying errors against the predefined set
- Walking error chains

No side effects on import.
"""

from .chain import FormattedError, errorf, unwrap, is_, as_
from .stack import Stack, StackFormatError, DEFAULT_DEPTH
from .error import Error
from .predefined import (
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
    PREDEFINED_ERRORS,
    STATUS_CODES,
    is_predefined,
    http_status,
)
from .traversal import find_original_error_with_stack, find_first_error_with_stack
from .constructors import (
    new,
    new_with_stack,
    newf,
    wrap,
    wrapf,
    wrap_with_custom_err,
    wrapf_with_custom_err,
    add_custom_call_stack,
)

__all__ = [
    # Types
    "Error",
    "FormattedError",
    "Stack",
    "StackFormatError",
    "DEFAULT_DEPTH",

    # Constructors
    "new",
    "new_with_stack",
    "newf",
    "wrap",
    "wrapf",
    "wrap_with_custom_err",
    "wrapf_with_custom_err",
    "add_custom_call_stack",

    # Inspection
    "find_original_error_with_stack",
    "find_first_error_with_stack",

    # Standard chain helpers
    "is_",
    "as_",
    "unwrap",
    "errorf",

    # Predefined errors
    "ERR_BAD_REQUEST",
    "ERR_UNAUTHORIZED",
    "ERR_REGISTRATION_REQUIRED",
    "ERR_PAYMENT_ERROR",
    "ERR_FORBIDDEN_ACTION",
    "ERR_NOT_FOUND",
    "ERR_CONFLICT",
    "ERR_PRECONDITION_FAILED",
    "ERR_VALIDATION",
    "ERR_INTERNAL_SERVER_ERROR",
    "PREDEFINED_ERRORS",
    "STATUS_CODES",
    "is_predefined",
    "http_status",
]
