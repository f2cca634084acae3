# gusto_mcp/core/tools.py
# This file declares every tool the Gusto MCP server exposes, in the order it is advertised.

from typing import Dict, Tuple

from gusto_mcp.models.common import ParameterSpec, ToolDescriptor

_COMPANY_ID = ParameterSpec(name="company_id", type="string", description="The company UUID", required=True)


TOOL_CATALOG: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="list_employees",
        description="List all employees for a company in Gusto",
        parameters=(
            _COMPANY_ID,
            ParameterSpec(name="page", type="number", description="Page number for pagination"),
            ParameterSpec(name="per", type="number", description="Number of results per page (max 100)"),
        ),
    ),
    ToolDescriptor(
        name="get_employee",
        description="Get details of a specific employee by ID",
        parameters=(
            ParameterSpec(name="employee_id", type="string", description="The employee UUID", required=True),
        ),
    ),
    ToolDescriptor(
        name="list_payrolls",
        description="List payrolls for a company, optionally filtered by date range and processing status",
        parameters=(
            _COMPANY_ID,
            ParameterSpec(name="processed", type="boolean", description="Filter by processed status"),
            ParameterSpec(name="start_date", type="string", description="Start date filter (YYYY-MM-DD)"),
            ParameterSpec(name="end_date", type="string", description="End date filter (YYYY-MM-DD)"),
        ),
    ),
    ToolDescriptor(
        name="get_payroll",
        description="Get details of a specific payroll",
        parameters=(
            _COMPANY_ID,
            ParameterSpec(name="payroll_id", type="string", description="The payroll ID or UUID", required=True),
        ),
    ),
    ToolDescriptor(
        name="list_contractors",
        description="List all contractors for a company",
        parameters=(
            _COMPANY_ID,
            ParameterSpec(name="page", type="number", description="Page number for pagination"),
            ParameterSpec(name="per", type="number", description="Number of results per page"),
        ),
    ),
    ToolDescriptor(
        name="get_company",
        description="Get company details including locations and settings",
        parameters=(_COMPANY_ID,),
    ),
    ToolDescriptor(
        name="list_benefits",
        description="List all company benefits (health insurance, 401k, etc.)",
        parameters=(_COMPANY_ID,),
    ),
)

# Lookup by name; built from the tuple above so the two never disagree.
TOOLS_BY_NAME: Dict[str, ToolDescriptor] = {tool.name: tool for tool in TOOL_CATALOG}

if len(TOOLS_BY_NAME) != len(TOOL_CATALOG):
    raise RuntimeError("Tool names in TOOL_CATALOG must be unique.")
