# Process entry point: `python -m gusto_mcp` or the `gusto-mcp` console script.
# Date: 2026-10-18
# Version: 1.0.0

import asyncio

from gusto_mcp.core.config import load_settings_or_exit
from gusto_mcp.utils.logger import console


def main():
    settings = load_settings_or_exit()
    console.set_level(settings.LOG_LEVEL)

    if settings.TRANSPORT == "http":
        import uvicorn
        from gusto_mcp.main import create_app

        uvicorn.run(create_app(settings), host=settings.HTTP_HOST, port=settings.HTTP_PORT)
        return

    from gusto_mcp.server import run_stdio

    try:
        asyncio.run(run_stdio(settings))
    except KeyboardInterrupt:
        console.info("Gusto MCP server stopped.")


if __name__ == "__main__":
    main()
