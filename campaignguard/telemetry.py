"""
Telemetry for lint and experiment decisions.

Attributes only: no ad copy, no creative URLs, no experiment payloads.
"""
import os
import logging
from typing import Literal

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.trace import get_current_span

logger = logging.getLogger("campaignguard.telemetry")


def init_telemetry():
    """
    Initialize Azure Application Insights via OpenTelemetry.
    No-op unless a connection string is configured.
    """
    connection_string = os.getenv("AZURE_APPINSIGHTS_CONNECTION_STRING")

    if not connection_string:
        return  # Telemetry disabled (local / tests)

    configure_azure_monitor(
        connection_string=connection_string
    )
    logger.info("Azure Monitor telemetry enabled")


def emit_lint_telemetry(
    latency_ms: int,
    score: int,
    overall: Literal["pass", "warning", "fail"],
    violation_count: int,
    cache_hit: bool,
):
    """
    Emit a single event per lint call.
    """
    assert isinstance(latency_ms, int), "latency_ms must be int"
    assert isinstance(score, int), "score must be int"
    assert overall in ("pass", "warning", "fail"), f"overall must be pass/warning/fail, got {overall}"
    assert isinstance(violation_count, int), "violation_count must be int"
    assert isinstance(cache_hit, bool), "cache_hit must be bool"

    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="campaignguard.lint",
        attributes={
            "latency_ms": latency_ms,
            "score": score,
            "overall": overall,
            "violation_count": violation_count,
            "cache_hit": cache_hit,
        }
    )


def emit_analysis_telemetry(
    latency_ms: int,
    recommendation: Literal["continue", "stop_winner", "stop_loser", "extend_duration"],
    guardrail_breaches: int,
):
    assert isinstance(latency_ms, int), "latency_ms must be int"
    assert recommendation in ("continue", "stop_winner", "stop_loser", "extend_duration"), (
        f"unknown recommendation {recommendation}"
    )
    assert isinstance(guardrail_breaches, int), "guardrail_breaches must be int"

    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="campaignguard.experiment_analysis",
        attributes={
            "latency_ms": latency_ms,
            "recommendation": recommendation,
            "guardrail_breaches": guardrail_breaches,
        }
    )


def emit_exception_telemetry(exception: Exception):
    """Exception class name only; messages may echo ad copy."""
    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="campaignguard.exception",
        attributes={
            "exception_type": type(exception).__name__
        }
    )
