"""Sentry error reporting for the bridge CLI.

Events are tagged with the CLI subcommand that raised them, and a
BridgeError's structured fields (offending spec, opcode index, lookup key,
deck path and counts) travel with the event as the "bridge" context.
"""

import os
from typing import Any, Dict, Optional

import sentry_sdk
from dotenv import load_dotenv

# BridgeError attributes worth attaching to an event
ERROR_FIELDS = (
    "spec", "index", "key", "table",
    "player", "location", "sequence", "length",
    "path", "count",
)


def init_sentry(command: Optional[str] = None, release: Optional[str] = None) -> bool:
    """Initialize Sentry if SENTRY_DSN is configured.

    Args:
        command: CLI subcommand, set as the "command" tag on every event.
        release: Release tag, e.g. "ygo-bridge@0.1.0".

    Returns:
        True if Sentry was initialized, False if no DSN is set.
    """
    load_dotenv()

    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=os.getenv("ENVIRONMENT", "development"),
        release=release,
        send_default_pii=False,
        traces_sample_rate=0.0,
    )
    if command:
        sentry_sdk.set_tag("command", command)
    return True


def error_context(error: BaseException) -> Dict[str, Any]:
    """JSON-safe view of the structured fields a bridge error carries."""
    context: Dict[str, Any] = {"type": type(error).__name__}
    for field in ERROR_FIELDS:
        value = getattr(error, field, None)
        if value is None:
            continue
        context[field] = value if isinstance(value, (int, str)) else str(value)
    return context


def capture_exception(error: BaseException) -> None:
    """Report a bridge error with its fields attached."""
    sentry_sdk.set_context("bridge", error_context(error))
    sentry_sdk.capture_exception(error)
