# The module defines the error taxonomy of the Gusto MCP server.
# Date: 2026-10-18
# Version: 1.0.0


class GustoMCPError(Exception):
    """Base class for every error raised while serving a tool invocation."""


class UpstreamError(GustoMCPError):
    """
    The Gusto API answered with a non-success HTTP status.
    Attributes:
        status_code (int): The HTTP status code.
        status_text (str): The HTTP reason phrase.
        body (str): The full response body text.
    """
    def __init__(self, status_code: int, status_text: str, body: str):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"Gusto API error: {status_code} {status_text} - {body}")


class UnknownToolError(GustoMCPError):
    """The invocation named a tool that is not in the catalog."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class TransportError(GustoMCPError):
    """A network-level failure (DNS, refused connection, timeout)."""
