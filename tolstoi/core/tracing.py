"""
tolstoi - OpenTelemetry Tracing Module

Patterns Applied:
- One-time configure_tracing() at startup
- Manual spans around the book run and each chapter score

Without configure_tracing() the global provider is OpenTelemetry's no-op
provider, so spans cost nothing.
"""

import sys
from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from tolstoi import __version__

# Module-level flag for one-time configuration
_configured: bool = False

SERVICE_NAME = "tolstoi"


def configure_tracing(
    service_name: str = SERVICE_NAME,
    console_export: bool = False,
) -> None:
    """Configure OpenTelemetry tracing for the application.

    This function must be called exactly ONCE at startup.

    Args:
        service_name: Name of the service for trace attribution
        console_export: Whether to export spans to stderr (for development)
    """
    global _configured

    if _configured:
        return

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": __version__,
        }
    )

    provider = TracerProvider(resource=resource)

    if console_export:
        # stdout carries the verdicts
        console_exporter = ConsoleSpanExporter(out=sys.stderr)
        provider.add_span_processor(SimpleSpanProcessor(console_exporter))

    trace.set_tracer_provider(provider)

    _configured = True


def get_tracer(name: str) -> Any:
    """Get a tracer instance for creating spans.

    Args:
        name: Tracer name (typically module name)

    Returns:
        OpenTelemetry Tracer instance
    """
    return trace.get_tracer(name)


def reset_tracing() -> None:
    """Reset tracing configuration for testing."""
    global _configured
    _configured = False
