# errorchain/infra/observability/otel/configure.py
from __future__ import annotations

import logging
from typing import Any, Optional

from errorchain.config import ErrorChainConfig, load_config

logger = logging.getLogger(__name__)


def try_create_tracer(
    config: Optional[ErrorChainConfig] = None,
    *,
    exporter: Any = None,
    set_global: bool = True,
):
    """
    Try to create an OpenTelemetry tracer from configuration.

    Enable rules (when config is not given, it is loaded from YAML + env):
      - ERRORCHAIN_OTEL=1
      - OR OTEL_EXPORTER_OTLP_ENDPOINT is set

    Args:
      config: Configuration to use instead of load_config()
      exporter: Span exporter to use instead of the OTLP gRPC exporter
      set_global: Install the provider as the global tracer provider

    Returns:
      tracer or None (if OTel is disabled or unavailable)
    """
    if config is None:
        config = load_config()

    otel = config.otel
    if not otel.enabled:
        logger.debug("OpenTelemetry reporting disabled")
        return None

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
    except ImportError:
        logger.warning("OpenTelemetry SDK not installed; install errorchain[otel]")
        return None

    if exporter is None:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
                OTLPSpanExporter,
            )
        except ImportError:
            logger.warning("OTLP exporter not installed; install errorchain[otel]")
            return None

        exporter = OTLPSpanExporter(
            endpoint=otel.endpoint,
            insecure=otel.insecure,
        )

    resource = Resource.create({"service.name": otel.service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(exporter))

    if set_global:
        trace.set_tracer_provider(provider)

    return provider.get_tracer("errorchain")
