# errorchain/infra/observability/otel/handler.py
"""
Report errors to the active OpenTelemetry span.

The span is marked as failed and tagged with the error message, type and
call stack. Request details attached with with_request()/request_scope()
are added when present.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from opentelemetry import context as otel_context
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Status, StatusCode

from errorchain.core.errors import Error, Stack, StackFormatError, as_, wrapf

logger = logging.getLogger(__name__)

# Span attribute keys
ERROR = "error"
ERROR_MSG = "error.message"
ERROR_TYPE = "error.type"
ERROR_STACK = "error.stack"
ERROR_DETAILS = "error.details"
HTTP_METHOD = "http.method"
HTTP_URL = "http.url"

_REQUEST_INFO_KEY = otel_context.create_key("errorchain.request_info")


@dataclass(frozen=True)
class RequestInfo:
    """
    HTTP request information for error enrichment.

    Only method and uri are needed for basic usage. Headers and body are
    optional; callers must scrub sensitive data before attaching them.
    """
    method: str = ""
    uri: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_details(self) -> str:
        """Compact JSON blob of the non-empty fields, or "" when all are empty."""
        extra = {}
        if self.method:
            extra["method"] = self.method
        if self.uri:
            extra["uri"] = self.uri
        if self.headers:
            extra["headers"] = dict(self.headers)
        if self.body:
            extra["body"] = self.body

        if not extra:
            return ""
        return json.dumps(extra, separators=(",", ":"), sort_keys=True)


def with_request(info: RequestInfo, context: Optional[Context] = None) -> Context:
    """Return a context derived from context (or the current one) carrying info."""
    return otel_context.set_value(_REQUEST_INFO_KEY, info, context)


def get_request(context: Optional[Context] = None) -> Optional[RequestInfo]:
    info = otel_context.get_value(_REQUEST_INFO_KEY, context)
    return info if isinstance(info, RequestInfo) else None


@contextmanager
def request_scope(info: RequestInfo) -> Iterator[Context]:
    """Attach info to the current context for the duration of the block."""
    ctx = with_request(info)
    token = otel_context.attach(ctx)
    try:
        yield ctx
    finally:
        otel_context.detach(token)


def handle_error(
    err: Optional[BaseException],
    context: Optional[Context] = None,
    *,
    end_span: bool = True,
) -> Optional[Error]:
    """
    Report err to the span active in context (or the current context).

    Returns:
        None on success, when err is None, or when no span is active;
        an Error if the stack trace could not be built
    """
    if err is None:
        return None

    span = trace.get_current_span(context)
    if not span.get_span_context().is_valid:
        logger.debug("No active span; %s not reported", type(err).__name__)
        return None

    try:
        typed = as_(err, Error)
        try:
            if typed is not None:
                stack = "\n".join(typed.get_call_stack() or [])
            else:
                stack = build_stack(err)
        except StackFormatError as exc:
            return wrapf(exc, "failed to build stack trace")

        span.set_attribute(ERROR, True)
        span.set_attribute(ERROR_MSG, str(err))
        span.set_attribute(ERROR_TYPE, _type_name(err))
        span.set_attribute(ERROR_STACK, stack)
        span.set_status(Status(StatusCode.ERROR, str(err)))
        _set_span_request_info(span, context)
    finally:
        if end_span:
            span.end()

    return None


def _set_span_request_info(span: trace.Span, context: Optional[Context]) -> None:
    info = get_request(context)
    if info is None:
        return

    if info.method:
        span.set_attribute(HTTP_METHOD, info.method)
    if info.uri:
        span.set_attribute(HTTP_URL, info.uri)

    details = info.to_details()
    if details:
        span.set_attribute(ERROR_DETAILS, details)


def build_stack(err: Optional[BaseException] = None, skip: int = 2) -> str:
    """
    Render a call stack for an error that carries none of its own.

    Uses err's traceback when it was raised, otherwise the current stack
    minus the first skip frames (build_stack itself and its caller).

    Raises:
        StackFormatError: a frame could not be rendered
    """
    tb = getattr(err, "__traceback__", None)
    if tb is not None:
        stack = Stack.from_traceback(tb)
    else:
        stack = Stack.capture(skip=skip)
    return "\n".join(stack.format())


def _type_name(err: BaseException) -> str:
    cls = type(err)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
