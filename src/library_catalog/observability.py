"""Logfire observability for the library catalog.

Spans are only opened once initialize_observability() has configured logfire
with observability enabled. Until then, or when LIBRARY_CATALOG_LOGFIRE_ENABLED
is false, trace_catalog_operation() is a no-op and yields None.
"""

import logging
from contextlib import contextmanager

import logfire

from .config import CatalogConfig, get_config

logger = logging.getLogger(__name__)

_tracing_enabled = False


def initialize_observability(config: CatalogConfig | None = None) -> None:
    """Configure logfire from the catalog configuration."""
    global _tracing_enabled
    config = config or get_config()

    if not config.logfire_enabled:
        _tracing_enabled = False
        logger.debug("Observability disabled via configuration")
        return

    logfire.configure(
        service_name=config.server_name,
        service_version=config.server_version,
        send_to_logfire=config.logfire_send,
        console=None if config.logfire_console else False,
    )
    _tracing_enabled = True


def tracing_enabled() -> bool:
    """True once logfire has been configured with observability enabled."""
    return _tracing_enabled


@contextmanager
def trace_catalog_operation(component: str, operation: str, **attributes):
    """Context manager for tracing inventory and patron operations."""
    if not _tracing_enabled:
        yield None
        return

    with logfire.span(
        f"catalog.{component}.{operation}",
        catalog_component=component,
        catalog_operation=operation,
        **attributes,
    ) as span:
        try:
            yield span
        except Exception as e:
            span.set_attribute("catalog.error", str(e))
            raise
