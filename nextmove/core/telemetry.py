# nextmove/core/telemetry.py
"""
OpenTelemetry integration.

Tracing is optional: when the opentelemetry packages are not installed
the helpers below log a warning once and every span decorator becomes a
passthrough.
"""

from __future__ import annotations

import inspect
import logging
from typing import Optional
from functools import wraps

from nextmove.core.config import settings

log = logging.getLogger(__name__)

# Global tracer instance
_tracer = None
_initialized = False


def init_telemetry(service_name: str = "nextmove-branding"):
    """
    Initialize OpenTelemetry with an optional OTLP exporter.

    Should be called once at application startup.
    """
    global _tracer, _initialized

    if _initialized:
        return
    _initialized = True

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.resources import Resource, SERVICE_NAME
        from opentelemetry.sdk.trace.export import BatchSpanProcessor

        resource = Resource(attributes={
            SERVICE_NAME: service_name,
            "deployment.environment": settings.ENV,
        })
        tracer_provider = TracerProvider(resource=resource)

        otlp_endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
        if otlp_endpoint:
            try:
                from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

                tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
                log.info("[Telemetry] OTLP exporter configured: %s", otlp_endpoint)
            except Exception as e:
                log.warning("[Telemetry] Failed to configure OTLP exporter: %s", e)

        trace.set_tracer_provider(tracer_provider)
        _tracer = trace.get_tracer(__name__)

        log.info("[Telemetry] OpenTelemetry initialized for service: %s", service_name)

    except ImportError:
        log.warning("[Telemetry] OpenTelemetry packages not installed")
    except Exception as e:
        log.warning("[Telemetry] Failed to initialize: %s", e)


def get_tracer():
    """Get the global tracer instance."""
    if not _initialized:
        init_telemetry()
    return _tracer


def instrument_fastapi(app):
    """
    Instrument FastAPI application with OpenTelemetry.

    Call this after creating the FastAPI app.
    """
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app)
        log.info("[Telemetry] FastAPI instrumented")
    except ImportError:
        log.warning("[Telemetry] FastAPI instrumentation not available")
    except Exception as e:
        log.warning("[Telemetry] Failed to instrument FastAPI: %s", e)


# ============================================================================
# Span Decorators
# ============================================================================

def traced(span_name: str, attributes: Optional[dict] = None):
    """
    Decorator to add tracing to a function.

    Usage:
        @traced("branding.read")
        async def get_settings(self):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            tracer = get_tracer()
            if tracer is None:
                return await func(*args, **kwargs)

            with tracer.start_as_current_span(span_name) as span:
                if attributes:
                    for key, value in attributes.items():
                        span.set_attribute(key, value)
                try:
                    result = await func(*args, **kwargs)
                    span.set_attribute("success", True)
                    return result
                except Exception as e:
                    span.set_attribute("success", False)
                    span.set_attribute("error", str(e))
                    span.record_exception(e)
                    raise

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            tracer = get_tracer()
            if tracer is None:
                return func(*args, **kwargs)

            with tracer.start_as_current_span(span_name) as span:
                if attributes:
                    for key, value in attributes.items():
                        span.set_attribute(key, value)
                try:
                    result = func(*args, **kwargs)
                    span.set_attribute("success", True)
                    return result
                except Exception as e:
                    span.set_attribute("success", False)
                    span.set_attribute("error", str(e))
                    span.record_exception(e)
                    raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
