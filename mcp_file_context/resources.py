"""Resource catalog for the MCP file context server.

Every file under the base directory is exposed as a ``file://`` resource
with a ``text/plain`` MIME type, named by its path relative to the base
directory.
"""

from typing import List
from urllib.parse import unquote, urlparse

from mcp import types
from mcp.server.fastmcp.utilities.logging import get_logger
from mcp.server.lowlevel.helper_types import ReadResourceContents

from .operations import FileOperations

logger = get_logger(__name__)

MIME_TYPE = "text/plain"


class ResourceCatalog:
    """Maps the directory walk to MCP resource descriptors."""

    def __init__(self, operations: FileOperations):
        self.operations = operations

    def resource_uri(self, relative_path: str) -> str:
        """Build the ``file://`` URI for a path relative to the base directory."""
        return self.operations.resolve(relative_path).as_uri()

    async def list_resources(self) -> List[types.Resource]:
        """List every file under the base directory as a resource.

        Walks the whole tree on each call. Nothing is filtered or paginated.

        Raises:
            OSError: If the walk fails
        """
        files = await self.operations.list_files_recursively()
        logger.debug(f"Listing {len(files)} resources")

        return [
            types.Resource(
                uri=self.resource_uri(file),
                mimeType=MIME_TYPE,
                name=file,
            )
            for file in files
        ]

    async def read_resource(self, uri: str) -> List[ReadResourceContents]:
        """Read the file behind a ``file://`` resource URI.

        Args:
            uri: Resource URI as produced by list_resources

        Returns:
            A single text content with the file's full text

        Raises:
            ValueError: If the URI is not a file URI or the file cannot be read
        """
        parsed = urlparse(str(uri))
        if parsed.scheme != "file":
            raise ValueError(f"Unsupported resource URI: {uri}")

        try:
            contents = await self.operations.read_file(unquote(parsed.path))
        except (OSError, ValueError) as e:
            raise ValueError(f"Failed to read file: {e}")

        return [ReadResourceContents(content=contents, mime_type=MIME_TYPE)]
