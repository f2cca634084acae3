# Routes a tool invocation to its Gusto API call and normalizes the outcome.
# Date: 2026-10-18
# Version: 1.0.0

from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from gusto_mcp.core.errors import GustoMCPError, UnknownToolError
from gusto_mcp.core.tools import TOOL_CATALOG
from gusto_mcp.models.common import Failure, InvocationRequest, InvocationResult, Success, ToolDescriptor, render_result
from gusto_mcp.services.gusto_client import GustoClient
from gusto_mcp.utils.logger import console

ToolHandler = Callable[[GustoClient, Dict[str, Any]], Awaitable[Any]]


# Each handler reads only the keys documented for its tool; anything else in
# the argument bag is ignored. Required keys are not checked here: a missing
# identifier ends up in the path and the Gusto API rejects the request.
async def _list_employees(client: GustoClient, args: Dict[str, Any]) -> Any:
    return await client.list_employees(args.get("company_id"), args.get("page"), args.get("per"))


async def _get_employee(client: GustoClient, args: Dict[str, Any]) -> Any:
    return await client.get_employee(args.get("employee_id"))


async def _list_payrolls(client: GustoClient, args: Dict[str, Any]) -> Any:
    return await client.list_payrolls(
        args.get("company_id"), args.get("processed"), args.get("start_date"), args.get("end_date")
    )


async def _get_payroll(client: GustoClient, args: Dict[str, Any]) -> Any:
    return await client.get_payroll(args.get("company_id"), args.get("payroll_id"))


async def _list_contractors(client: GustoClient, args: Dict[str, Any]) -> Any:
    return await client.list_contractors(args.get("company_id"), args.get("page"), args.get("per"))


async def _get_company(client: GustoClient, args: Dict[str, Any]) -> Any:
    return await client.get_company(args.get("company_id"))


async def _list_benefits(client: GustoClient, args: Dict[str, Any]) -> Any:
    return await client.list_benefits(args.get("company_id"))


TOOL_HANDLERS: Dict[str, ToolHandler] = {
    "list_employees": _list_employees,
    "get_employee": _get_employee,
    "list_payrolls": _list_payrolls,
    "get_payroll": _get_payroll,
    "list_contractors": _list_contractors,
    "get_company": _get_company,
    "list_benefits": _list_benefits,
}


class Dispatcher:
    """
    Maps a (tool name, arguments) pair to exactly one GustoClient call.

    The dispatcher holds no mutable state, so overlapping invocations are safe.
    invoke() never raises: every outcome comes back as Success or Failure.
    """
    def __init__(self,
                 client: GustoClient,
                 catalog: Sequence[ToolDescriptor] = TOOL_CATALOG,
                 handlers: Optional[Dict[str, ToolHandler]] = None):
        self._client = client
        self._catalog = tuple(catalog)
        self._handlers = dict(TOOL_HANDLERS if handlers is None else handlers)
        self._check_catalog()

    def _check_catalog(self):
        """Every catalog entry must have exactly one handler, and vice versa."""
        catalog_names = {tool.name for tool in self._catalog}
        handler_names = set(self._handlers)
        if catalog_names != handler_names:
            raise RuntimeError(
                "Tool catalog and dispatch table disagree: "
                f"without handler {sorted(catalog_names - handler_names)}, "
                f"without catalog entry {sorted(handler_names - catalog_names)}"
            )

    @property
    def catalog(self) -> Tuple[ToolDescriptor, ...]:
        return self._catalog

    def list_tools(self) -> List[Dict[str, Any]]:
        """Returns the definitions of all tools, in catalog order."""
        return [tool.get_definition() for tool in self._catalog]

    async def invoke(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> InvocationResult:
        """
        Executes one tool and normalizes the result.
        Args:
            tool_name (str): The name of the tool to run.
            arguments (dict): The argument bag sent by the agent.
        Returns:
            Success wrapping the upstream JSON, or Failure carrying the error message.
        """
        request = InvocationRequest(tool_name=tool_name, arguments=arguments or {})
        console.info(f"Executing tool '{request.tool_name}' with arguments: {sorted(request.arguments)}")
        try:
            handler = self._handlers.get(request.tool_name)
            if handler is None:
                raise UnknownToolError(request.tool_name)
            payload = await handler(self._client, request.arguments)
        except GustoMCPError as e:
            console.error(f"Tool '{request.tool_name}' failed: {e}")
            return Failure(message=str(e))
        except Exception as e:
            console.exception(f"An unexpected error occurred while executing tool '{request.tool_name}'.")
            return Failure(message=str(e))

        console.success(f"Tool '{request.tool_name}' executed successfully.")
        return Success(payload=payload)

    async def call_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> Tuple[str, bool]:
        """Runs a tool and returns the (content_text, is_error) pair sent back to the agent."""
        return render_result(await self.invoke(tool_name, arguments))
