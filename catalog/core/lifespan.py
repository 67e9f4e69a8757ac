"""Service lifespan: startup and shutdown.

Single place for all startup/shutdown logic. No business logic here,
only wiring of infrastructure (logging, telemetry, node store client).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from catalog.application.use_cases.categories import CategoryService
from catalog.core.config import Settings, get_settings
from catalog.infrastructure.node_store.client import NodeStoreClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(
    settings: Settings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> AsyncIterator[CategoryService]:
    """Run startup, yield a ready CategoryService, then run shutdown.

    Startup order: logging, telemetry (if enabled), node store client and
    readiness ping. Shutdown order: node store client close, telemetry
    shutdown. Shutdown also runs when a startup step fails.
    """
    settings = settings or get_settings()

    # ---- Startup ----
    from catalog.shared.telemetry.logging import setup_logging

    setup_logging(settings)

    client: NodeStoreClient | None = None
    try:
        if settings.telemetry_enabled:
            from catalog.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

            telemetry = TelemetryConfig(
                service_name=settings.app_name,
                service_version=settings.app_version,
                enabled=True,
                environment=settings.telemetry_environment,
            )
            set_telemetry(telemetry)
            telemetry.setup_telemetry(
                exporter_type=settings.telemetry_exporter,
                otlp_endpoint=settings.telemetry_otlp_endpoint,
                sample_rate=settings.telemetry_sample_rate,
            )
            telemetry.instrument_httpx()
            logger.info("Telemetry initialized")

        client = NodeStoreClient.from_settings(settings, http_client=http_client)
        await client.ping()
        logger.info("Node store ready: %s", settings.node_store_base_url)

        yield CategoryService.from_settings(client, settings)
    finally:
        # ---- Shutdown ----
        if client is not None:
            await client.aclose()
            logger.info("Node store client closed")

        from catalog.shared.telemetry.telemetry import get_telemetry, set_telemetry

        telemetry_instance = get_telemetry()
        if telemetry_instance is not None:
            telemetry_instance.shutdown()
            set_telemetry(None)
            logger.info("Telemetry shutdown complete")
