# errorchain/__init__.py
"""
errorchain - Enriched, chainable errors with call stacks

Wrap errors with context and a captured call stack, classify them with
predefined errors, and walk the chain back to the root cause.

Basic usage:
    >>> import errorchain as errors
    >>> err = errors.new("db failure")
    >>> wrapped = errors.wrap(err, "reading config")
    >>> str(wrapped)
    'reading config: db failure'
    >>> errors.wrap(None, "reading config") is None
    True

Classification:
    >>> missing = errors.wrapf_with_custom_err(err, errors.ERR_NOT_FOUND, "user %d missing", 42)
    >>> errors.is_(missing, errors.ERR_NOT_FOUND)
    True
    >>> errors.http_status(missing)
    404

Stacks:
    >>> errors.new_with_stack("boom").get_call_stack()[0]  # doctest: +SKIP
    '__main__.<module>\\n\\t<stdin>:1'

Tracing (optional, requires the ``otel`` extra):
    >>> from errorchain.infra.observability.otel import handle_error  # doctest: +SKIP
"""

__version__ = "0.1.0"

from .core.errors import (
    # Types
    Error,
    FormattedError,
    Stack,
    StackFormatError,

    # Constructors
    new,
    new_with_stack,
    newf,
    wrap,
    wrapf,
    wrap_with_custom_err,
    wrapf_with_custom_err,
    add_custom_call_stack,

    # Inspection
    find_original_error_with_stack,
    find_first_error_with_stack,

    # Standard chain helpers
    is_,
    as_,
    unwrap,
    errorf,

    # Predefined errors
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

__all__ = [
    # Version
    "__version__",

    # Types
    "Error",
    "FormattedError",
    "Stack",
    "StackFormatError",

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
