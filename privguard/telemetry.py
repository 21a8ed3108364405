"""
Validation telemetry.

Privacy-safe by construction: only latency, score, classification and the
fail-closed flag leave the process. No payloads, no matched text.
"""
import logging
import os

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.trace import get_current_span

logger = logging.getLogger("privguard.telemetry")

CLASSIFICATIONS = ("PUBLIC", "CONFIDENTIAL", "RESTRICTED")


def init_telemetry():
    """
    Initialize Azure Application Insights via OpenTelemetry.
    No-op unless AZURE_APPINSIGHTS_CONNECTION_STRING is set.
    """
    connection_string = os.getenv("AZURE_APPINSIGHTS_CONNECTION_STRING")

    if not connection_string:
        return  # Telemetry disabled (local / tests)

    configure_azure_monitor(
        connection_string=connection_string
    )
    logger.info("Azure Monitor telemetry configured")


def emit_validation_telemetry(
    latency_ms: int,
    risk_score: int,
    classification: str,
    failed_closed: bool,
):
    """
    Emit one `privguard.validation` event on the active span.

    Attributes are locked to these four values.
    """
    assert isinstance(latency_ms, int), "latency_ms must be int"
    assert isinstance(risk_score, int), "risk_score must be int"
    assert classification in CLASSIFICATIONS, f"classification must be one of {CLASSIFICATIONS}, got {classification}"
    assert isinstance(failed_closed, bool), "failed_closed must be bool"

    span = get_current_span()
    if not span.is_recording():
        return  # No active span - telemetry disabled or not in trace context

    span.add_event(
        name="privguard.validation",
        attributes={
            "latency_ms": latency_ms,
            "risk_score": risk_score,
            "classification": classification,
            "failed_closed": failed_closed,
        }
    )


def scrub_exception_for_telemetry(exception: Exception) -> str:
    """
    Exception messages may echo payload content.
    Only the exception class name is ever reported.
    """
    return type(exception).__name__


def emit_exception_telemetry(exception: Exception):
    span = get_current_span()
    if not span.is_recording():
        return

    span.add_event(
        name="privguard.exception",
        attributes={
            "exception_type": scrub_exception_for_telemetry(exception)
        }
    )
