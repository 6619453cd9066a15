# errorchain/infra/observability/otel/__init__.py
"""
OpenTelemetry integration.

Requires the ``otel`` extra (opentelemetry-api, opentelemetry-sdk).
"""

from .configure import try_create_tracer
from .handler import (
    RequestInfo,
    with_request,
    get_request,
    request_scope,
    handle_error,
    build_stack,
)

__all__ = [
    "try_create_tracer",
    "RequestInfo",
    "with_request",
    "get_request",
    "request_scope",
    "handle_error",
    "build_stack",
]
