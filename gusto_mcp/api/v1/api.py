# The module is to define the API router for the application.
# Date: 2026-10-18
# Version: 1.0.0

from fastapi import APIRouter
from gusto_mcp.api.v1.endpoints import tools

api_router = APIRouter()

# Include the tools router with a '/tools' prefix
api_router.include_router(tools.router, prefix="/tools", tags=["Tools"])
