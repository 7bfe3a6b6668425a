"""Library Catalog MCP Server

Exposes the in-memory catalog to MCP clients over the stdio transport.
Clients use the registered tools to maintain the catalog, search it, check
books in and out and read patron borrowing histories.

Logs go to stderr; stdout carries the JSON-RPC messages of the stdio transport.
"""

import inspect
import logging
import signal
import sys
from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from .config import CatalogConfig, get_config
from .library import get_library
from .observability import initialize_observability
from .tools import all_tools

logger = logging.getLogger(__name__)


def configure_logging(config: CatalogConfig) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if not config.is_development:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)


def bind_tool(tool: dict[str, Any]) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Expose a tool handler with keyword parameters taken from its input model.

    The handlers take one ``arguments`` dict. FastMCP derives a tool's input
    schema from the registered function's signature, so the wrapper carries a
    signature with one keyword parameter per input model field. Responses
    flagged ``isError`` are raised as ToolError so clients receive an MCP
    error result.
    """
    input_model: type[BaseModel] = tool["input_model"]
    handler = tool["handler"]

    async def call_tool(**arguments: Any) -> dict[str, Any]:
        result = await handler(arguments)
        if result.get("isError"):
            raise ToolError(result["content"][0]["text"])
        return result

    parameters = []
    annotations: dict[str, Any] = {}
    for field_name, field in input_model.model_fields.items():
        annotation = Annotated[field.annotation, Field(description=field.description)]
        parameters.append(
            inspect.Parameter(
                field_name,
                inspect.Parameter.KEYWORD_ONLY,
                default=inspect.Parameter.empty if field.is_required() else field.default,
                annotation=annotation,
            )
        )
        annotations[field_name] = annotation
    annotations["return"] = dict[str, Any]

    call_tool.__signature__ = inspect.Signature(parameters, return_annotation=dict[str, Any])
    call_tool.__annotations__ = annotations
    call_tool.__name__ = tool["name"]
    call_tool.__doc__ = tool["description"]
    return call_tool


def create_server(config: CatalogConfig) -> FastMCP:
    """Create the FastMCP server and register every catalog tool."""
    mcp = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=(
            "Library catalog and lending tracker. Use the tools to add, update and "
            "remove books, search the catalog by exact title, author or ISBN, check "
            "books out and in, and manage patrons and their borrowing histories."
        ),
    )

    for tool in all_tools:
        logger.debug("Registering tool: %s", tool["name"])
        try:
            mcp.tool(
                name=tool["name"],
                description=tool["description"],
            )(bind_tool(tool))
        except Exception:
            logger.exception("Failed to register tool %s", tool["name"])
            raise

    logger.info("Registered %d tools", len(all_tools))
    return mcp


def run_stdio_server(mcp: FastMCP, config: CatalogConfig) -> None:
    """Run the MCP server using stdio transport."""
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        logger.info("MCP Server ready and waiting for connections...")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


def main() -> None:
    """Entry point for ``library-catalog`` and ``python -m library_catalog.server``."""
    config = get_config()
    configure_logging(config)

    try:
        logger.info("Library Catalog MCP Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Debug Mode: %s", config.debug)

        initialize_observability(config)
        library = get_library()
        logger.info(
            "Catalog holds %d books and %d patrons", len(library.inventory), len(library.patrons)
        )

        run_stdio_server(create_server(config), config)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
