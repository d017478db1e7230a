"""MCP File Context Server.

This module wires the resource catalog, tools and prompts to a Model Context
Protocol server, so that MCP clients can discover and read the files under a
base directory.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from mcp import types
from mcp.server.fastmcp.utilities.logging import get_logger
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server

from . import __version__
from .operations import FileOperations
from .prompts import PromptProvider
from .resources import ResourceCatalog
from .tools import ToolInvoker

logger = get_logger(__name__)

SERVER_NAME = "file-context-server"


class RequestKind(str, Enum):
    """Request kinds the server answers, keyed by protocol method."""

    LIST_RESOURCES = "resources/list"
    READ_RESOURCE = "resources/read"
    LIST_TOOLS = "tools/list"
    CALL_TOOL = "tools/call"
    LIST_PROMPTS = "prompts/list"
    GET_PROMPT = "prompts/get"
    COMPLETE = "completion/complete"


# Server decorator that registers the handler for each request kind
_SERVER_HOOKS: Dict[RequestKind, str] = {
    RequestKind.LIST_RESOURCES: "list_resources",
    RequestKind.READ_RESOURCE: "read_resource",
    RequestKind.LIST_TOOLS: "list_tools",
    RequestKind.CALL_TOOL: "call_tool",
    RequestKind.LIST_PROMPTS: "list_prompts",
    RequestKind.GET_PROMPT: "get_prompt",
    RequestKind.COMPLETE: "completion",
}


class RequestHandlers:
    """One handler per request kind, all sharing a single base directory."""

    def __init__(self, base_dir: Union[str, Path]):
        """Initialize the components over a base directory.

        Args:
            base_dir: Directory exposed by the server

        Raises:
            ValueError: If base_dir is not a directory
        """
        self.operations = FileOperations(base_dir)
        self.catalog = ResourceCatalog(self.operations)
        self.tools = ToolInvoker(self.operations)
        self.prompts = PromptProvider(self.operations)

        self._routes: Dict[RequestKind, Callable[..., Awaitable[Any]]] = {
            RequestKind.LIST_RESOURCES: self.list_resources,
            RequestKind.READ_RESOURCE: self.read_resource,
            RequestKind.LIST_TOOLS: self.list_tools,
            RequestKind.CALL_TOOL: self.call_tool,
            RequestKind.LIST_PROMPTS: self.list_prompts,
            RequestKind.GET_PROMPT: self.get_prompt,
            RequestKind.COMPLETE: self.complete,
        }

    @property
    def base_dir(self) -> Path:
        return self.operations.base_dir

    def route(self, kind: RequestKind) -> Callable[..., Awaitable[Any]]:
        """Return the handler for a request kind."""
        return self._routes[kind]

    async def list_resources(self) -> List[types.Resource]:
        return await self.catalog.list_resources()

    async def read_resource(self, uri: Any) -> List[ReadResourceContents]:
        return await self.catalog.read_resource(str(uri))

    async def list_tools(self) -> List[types.Tool]:
        return self.tools.list_tools()

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]]
    ) -> List[types.TextContent]:
        logger.debug(f"Calling tool {name}")
        return await self.tools.call_tool(name, arguments)

    async def list_prompts(self) -> List[types.Prompt]:
        logger.info("Handling prompts/list request")
        return self.prompts.list_prompts()

    async def get_prompt(
        self, name: str, arguments: Optional[Dict[str, str]]
    ) -> types.GetPromptResult:
        logger.info("Handling prompts/get request")
        return await self.prompts.get_prompt(name, arguments)

    async def complete(
        self,
        ref: Union[types.PromptReference, types.ResourceTemplateReference],
        argument: types.CompletionArgument,
        context: Optional[types.CompletionContext] = None,
    ) -> types.Completion:
        logger.info("Handling completions/complete request")
        return await self.prompts.complete(ref, argument)


def create_server(base_dir: Union[str, Path]) -> Server:
    """Build an MCP server exposing a base directory.

    Args:
        base_dir: Directory exposed by the server

    Returns:
        Server with a handler registered for every request kind

    Raises:
        ValueError: If base_dir is not a directory
    """
    handlers = RequestHandlers(base_dir)
    server: Server = Server(
        SERVER_NAME,
        version=__version__,
        instructions="Provides read access to the files under the base directory",
    )

    for kind in RequestKind:
        hook = getattr(server, _SERVER_HOOKS[kind])
        # Tool arguments are validated by the tool handlers themselves
        decorator = hook(validate_input=False) if kind is RequestKind.CALL_TOOL else hook()
        decorator(handlers.route(kind))

    logger.info(f"Initialized file context server for base directory: {handlers.base_dir}")
    return server


async def serve(base_dir: Union[str, Path]) -> None:
    """Run the server over stdio until the client disconnects."""
    server = create_server(base_dir)
    logger.info("Starting filesystem MCP server")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )
