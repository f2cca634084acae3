# Gusto MCP server: the Gusto HR and payroll API as agent-callable tools.

__version__ = "1.0.0"
