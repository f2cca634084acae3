# The module provides a FastAPI application exposing the Gusto tools over HTTP.
# Date: 2026-10-18
# Version: 1.0.0

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI

from gusto_mcp.api.v1.api import api_router
from gusto_mcp.core.config import Settings, get_settings
from gusto_mcp.core.dispatcher import Dispatcher
from gusto_mcp.services.gusto_client import GustoClient
from gusto_mcp.utils.logger import console


def create_app(settings: Optional[Settings] = None,
               http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    """
    Builds the FastAPI application. The Gusto client is opened when the app
    starts and closed when it shuts down; settings are resolved at startup,
    not at import time.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        resolved = settings or get_settings()
        async with GustoClient.from_settings(resolved, http_client=http_client) as client:
            app.state.settings = resolved
            app.state.dispatcher = Dispatcher(client)
            console.success(f"{resolved.MCP_NAME} MCP server ready with {len(app.state.dispatcher.catalog)} tools.")
            yield

    app = FastAPI(
        title="Gusto MCP Server",
        version="1.0.0",
        description="Exposes the Gusto HR and payroll API as schema-described tools.",
        lifespan=lifespan,
    )

    @app.get("/", summary="Health Check", tags=["Status"])
    def read_root():
        """Root endpoint to check if the service is alive."""
        console.info("Health check endpoint was hit.")
        return {"message": "Gusto MCP Server is alive and running!"}

    # Include the v1 router with a global '/v1' prefix
    app.include_router(api_router, prefix="/v1")
    return app


app = create_app()
