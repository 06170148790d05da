"""
Server entry point: FastAPI app setup and route configuration.
Exposes the data-API inventory as JSON, in flat and grouped form.
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncGenerator
from typing import Any

import dotenv
import fastapi
import uvicorn
from fastapi.middleware import cors

from dedata import config
from dedata.data import loader
from dedata.models import intercept
from dedata.pipeline import projections, run
from dedata.utils import logger

dotenv.load_dotenv()

log = logger.create_logger("Server")

settings = config.ServerSettings()


@contextlib.asynccontextmanager
async def lifespan(_app: fastapi.FastAPI) -> AsyncGenerator[None]:
    """Log server start on startup."""
    log.section("dedata Server Started")
    log.info("Environment", {"env": settings.environment})
    yield


app = fastapi.FastAPI(title="dedata", lifespan=lifespan)

# ============================================================================
# Middleware
# ============================================================================

app.add_middleware(
    cors.CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# ============================================================================
# API Routes
# ============================================================================


@app.get("/api/sites")
async def sites_endpoint() -> list[dict[str, Any]]:
    """List the configured dashboards."""
    return projections.dump_camel(
        [intercept.SiteSummary(site_url=s.url, label=s.label) for s in loader.get_target_sites()]
    )


@app.get("/api/intercepted-urls")
async def intercepted_urls_endpoint() -> list[dict[str, Any]]:
    """
    Capture every dashboard and return each site's data URLs with their domain.
    """
    log.info("Incoming inventory request", {"view": "flat"})
    result = await run.run_inventory()
    return projections.dump_camel(projections.to_intercepted_urls(result))


@app.get("/api/data-url-groups")
async def data_url_groups_endpoint() -> list[dict[str, Any]]:
    """
    Capture every dashboard and return each site's data URLs grouped by domain.
    """
    log.info("Incoming inventory request", {"view": "grouped"})
    result = await run.run_inventory()
    return projections.dump_camel(projections.to_data_url_groups(result))


# ============================================================================
# Start Server
# ============================================================================


def main() -> None:
    """Entry point for running the server."""
    log.success(f"Server listening on {settings.host}:{settings.port}")
    uvicorn.run(
        "dedata.app:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    main()
