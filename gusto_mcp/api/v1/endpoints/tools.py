# The module is to define the API endpoints for tool discovery and invocation.
# Date: 2026-10-18
# Version: 1.0.0

from fastapi import APIRouter, Depends, Request
from gusto_mcp.core.dispatcher import Dispatcher
from gusto_mcp.models.api_models import CallToolRequest, CallToolResponse, ListToolsResponse
from gusto_mcp.utils.logger import console

router = APIRouter()


def get_dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher


@router.get("", response_model=ListToolsResponse, summary="List Tools")
def list_tools(dispatcher: Dispatcher = Depends(get_dispatcher)):
    """Returns the full tool catalog in its fixed order."""
    return ListToolsResponse(tools=dispatcher.list_tools())


@router.post("/call", response_model=CallToolResponse, summary="Call Tool")
async def call_tool(request: CallToolRequest, dispatcher: Dispatcher = Depends(get_dispatcher)):
    """
    Invokes one tool. Failures are reported in the body with is_error set;
    the HTTP status stays 200.
    """
    console.info(f"Received call for tool '{request.name}'")
    content, is_error = await dispatcher.call_tool(request.name, request.arguments)
    return CallToolResponse(content=content, is_error=is_error)
