# ==== OPENTELEMETRY TRACING CONFIGURATION ==== #

"""
OpenTelemetry tracing configuration for orderguard.

Tracing is opt-in: spans are exported over OTLP only when an exporter
endpoint is configured. Without one, the global no-op tracer provider is
left in place and spans cost next to nothing.
"""

from typing import Dict, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from orderguard.settings import Settings, get_settings


# ==== TRACING INITIALIZATION ==== #

def init_tracing(service_name: str, config: Settings | None = None) -> bool:
    """
    Initialize OpenTelemetry tracing with an OTLP exporter.

    Args:
        service_name (str): Name of the service for tracing identification
        config (Settings | None): Settings to read exporter options from,
            defaults to the global settings

    Returns:
        bool: True if a tracer provider was installed, False when no
            endpoint is configured
    """
    config = config or get_settings()
    endpoint = config.OTEL_EXPORTER_OTLP_ENDPOINT

    # ⚠️ Allow local runs without an APM backend
    if not endpoint:
        return False

    # --► RESOURCE ATTRIBUTES CONFIGURATION
    resource_attrs: Dict[str, Any] = {
        "service.name": config.OTEL_SERVICE_NAME or service_name,
        "deployment.environment": config.APP_ENV,
    }

    # --► TRACER PROVIDER SETUP
    provider = TracerProvider(resource=Resource.create(resource_attrs))

    # --► OTLP EXPORTER CONFIGURATION
    exporter = OTLPSpanExporter(
        endpoint=endpoint,
        headers=_parse_headers(config.OTEL_EXPORTER_OTLP_HEADERS)
    )

    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return True


def _parse_headers(headers_str: str | None) -> Dict[str, str]:
    """Parse OTLP headers from environment variable.

    Args:
        headers_str: Comma-separated key=value pairs

    Returns:
        Dictionary of headers
    """
    headers = {}
    if not headers_str:
        return headers

    for part in headers_str.split(","):
        if "=" in part:
            key, value = part.split("=", 1)
            headers[key.strip()] = value.strip()

    return headers


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer instance for the given module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)
