"""Tools exposed by the MCP file context server.

Two read-only tools are offered: ``list-files`` and ``read-file``.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server.fastmcp.utilities.logging import get_logger

from .operations import FileOperations

logger = get_logger(__name__)


class ToolName(str, Enum):
    """Names of the supported tools."""

    LIST_FILES = "list-files"
    READ_FILE = "read-file"


TOOLS: List[types.Tool] = [
    types.Tool(
        name=ToolName.LIST_FILES.value,
        description="Lists all files in the current directory",
        inputSchema={
            "type": "object",
            "properties": {
                "recursive": {
                    "type": "boolean",
                    "description": "Whether to list files recursively",
                    "default": False,
                },
            },
        },
    ),
    types.Tool(
        name=ToolName.READ_FILE.value,
        description="Read contents of a specific file",
        inputSchema={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path to the file to read",
                },
            },
            "required": ["path"],
        },
    ),
]


def _text(text: str) -> List[types.TextContent]:
    return [types.TextContent(type="text", text=text)]


class ToolInvoker:
    """Dispatches tool calls by name against the filesystem."""

    def __init__(self, operations: FileOperations):
        self.operations = operations

    def list_tools(self) -> List[types.Tool]:
        return list(TOOLS)

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> List[types.TextContent]:
        """Run a tool.

        Args:
            name: Tool name
            arguments: Tool arguments, if any

        Returns:
            A single text content with the tool's output

        Raises:
            ValueError: If the tool is unknown, an argument is invalid,
                        or the filesystem call fails
        """
        try:
            tool = ToolName(name)
        except ValueError:
            logger.warning(f"Unknown tool requested: {name}")
            raise ValueError("Tool not found")

        arguments = arguments or {}

        if tool is ToolName.LIST_FILES:
            return await self.list_files(bool(arguments.get("recursive", False)))
        return await self.read_file(arguments.get("path"))

    async def list_files(self, recursive: bool = False) -> List[types.TextContent]:
        """List the base directory, optionally walking the whole tree.

        Returns:
            The entries as indented JSON text
        """
        try:
            if recursive:
                files = await self.operations.list_files_recursively()
            else:
                files = await self.operations.list_directory()
        except OSError as e:
            raise ValueError(f"Failed to list files: {e}")

        return _text(json.dumps(files, indent=2))

    async def read_file(self, path: Optional[str]) -> List[types.TextContent]:
        """Read a file relative to the base directory.

        Raises:
            ValueError: If path is missing or empty, before any filesystem
                        access, or if the file cannot be read
        """
        if not isinstance(path, str) or not path:
            raise ValueError("Path is required")

        try:
            contents = await self.operations.read_file(path)
        except (OSError, ValueError) as e:
            raise ValueError(f"Failed to read file: {e}")

        return _text(contents)
