import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Any

import mcp.types as types
from dotenv import load_dotenv
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .errors import GeminiMCPError
from .gemini import generate_content
from .models import ToolResponse, validate_arguments
from .prompts import build_generation_request
from .tools import TOOL_LIST

# Load .env from project root (one level above gemini_mcp/)
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

# stdout carries the MCP protocol, so logs must go to stderr
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

server = Server("gemini-mcp", version=__version__)


async def dispatch(name: str, arguments: Any) -> ToolResponse:
    """Run one tool invocation; every failure comes back as an error response."""
    logger.info(
        "Incoming tool call: name=%s fields=%s",
        name,
        sorted(arguments) if isinstance(arguments, dict) else None,
    )

    try:
        request = validate_arguments(name, arguments)
        text = await generate_content(build_generation_request(request))
        response = ToolResponse(text=text)
        logger.info("Tool call succeeded: name=%s chars=%d", name, len(response.text))
        return response
    except GeminiMCPError as exc:
        logger.error("%s in %s: %s", type(exc).__name__, name, exc)
        return ToolResponse(text=f"Error: {exc}", is_error=True)
    except Exception as exc:
        logger.error("Unexpected exception in %s", name, exc_info=True)
        return ToolResponse(text=f"Error: {exc}", is_error=True)


# ── MCP handlers ─────────────────────────────────────────────────────────────

@server.list_tools()
async def list_tools() -> list[types.Tool]:
    return [types.Tool(**tool) for tool in TOOL_LIST]


# Input validation is done by validate_arguments so that callers get one
# aggregated message per call.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
    response = await dispatch(name, arguments)
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=response.text)],
        isError=response.is_error,
    )


# ── Entry point ──────────────────────────────────────────────────────────────

async def run() -> None:
    if not os.getenv("GEMINI_API_KEY"):
        logger.warning(
            "GEMINI_API_KEY is not set. "
            "Tool calls will return an error until the key is configured."
        )

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Gemini MCP server running")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.critical("Fatal error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
