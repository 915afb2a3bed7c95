# taskhub/shared/telemetry.py
from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from taskhub import __version__
from taskhub.shared.config import Settings, settings as default_settings

logger = structlog.get_logger()

def setup_telemetry(settings: Optional[Settings] = None) -> bool:
    """
    Initializes the OpenTelemetry SDK with OTLP export.
    Should be called once at process startup. Without an OTLP endpoint the
    global no-op provider stays in place and spans cost nothing.

    Returns:
        True if a tracer provider was installed.
    """
    settings = settings or default_settings
    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT")
        return False

    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "deployment.environment": settings.APP_ENV.value,
        "service.version": __version__,
    })

    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=f"{settings.OTEL_EXPORTER_OTLP_ENDPOINT.rstrip('/')}/v1/traces")
    provider.add_span_processor(BatchSpanProcessor(exporter))

    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    logger.info("telemetry_enabled", service=settings.OTEL_SERVICE_NAME)
    return True

def instrument_fastapi(app, settings: Optional[Settings] = None) -> None:
    """Auto-instruments the FastAPI application to trace incoming HTTP requests."""
    settings = settings or default_settings
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        # Imported here so the core can use get_tracer without pulling in FastAPI.
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app)

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("use_case.create_user"):
            ...
    """
    return trace.get_tracer(name)
