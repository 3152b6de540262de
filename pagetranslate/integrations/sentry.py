# =============================================================================
# Sentry Error Tracking Integration
# =============================================================================
#
# Setup:
#   1. Create account at sentry.io
#   2. Create a Python project
#   3. Copy DSN to .env: SENTRY_DSN=https://...@sentry.io/...
#
# Usage:
#   init_sentry() is called at app startup (in pagetranslate/api/app.py)
#
# =============================================================================

import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from pagetranslate.config import get_settings

logger = logging.getLogger(__name__)


def init_sentry() -> bool:
    """
    Initialize Sentry error tracking.

    Returns True if initialized, False if skipped.
    """
    settings = get_settings()

    if not settings.sentry_dsn:
        logger.info("SENTRY_DSN not set - error tracking disabled")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,

        # Performance monitoring (sample 10% of transactions in prod)
        traces_sample_rate=0.1 if settings.is_production else 1.0,

        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            StarletteIntegration(transaction_style="endpoint"),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR,
            ),
        ],

        # Page URLs are user input; don't attach request bodies or IPs
        send_default_pii=False,

        before_send=_filter_events,
        before_send_transaction=_filter_transactions,
    )

    logger.info(f"Sentry initialized for {settings.environment}")
    return True


def _filter_events(event: dict, hint: dict) -> dict | None:
    """Drop client errors; they are not bugs."""
    if "exc_info" in hint:
        exc_type, exc_value, _ = hint["exc_info"]

        from fastapi import HTTPException
        if isinstance(exc_value, HTTPException) and 400 <= exc_value.status_code < 500:
            return None

    return event


def _filter_transactions(event: dict, hint: dict) -> dict | None:
    """Filter out health checks."""
    transaction = event.get("transaction", "")

    if transaction in ("/health", "/healthz"):
        return None

    return event


def is_enabled() -> bool:
    return sentry_sdk.get_client().is_active()


def capture_exception(error: Exception, **context) -> str | None:
    """
    Capture an exception to Sentry.

    Returns the event ID if captured, None otherwise.
    """
    if not is_enabled():
        logger.debug(f"Error (Sentry disabled): {error}", exc_info=error)
        return None

    with sentry_sdk.new_scope() as scope:
        for key, value in context.items():
            scope.set_extra(key, value)
        return sentry_sdk.capture_exception(error)
