"""Prompt and argument completion support.

The server offers one prompt, ``file-contents``, which turns a file into a
user message. Its ``path`` argument can be completed from the files under
the base directory.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from mcp import types
from mcp.server.fastmcp.utilities.logging import get_logger

from .operations import FileOperations

logger = get_logger(__name__)


class PromptName(str, Enum):
    """Names of the supported prompts."""

    FILE_CONTENTS = "file-contents"


PROMPTS: List[types.Prompt] = [
    types.Prompt(
        name=PromptName.FILE_CONTENTS.value,
        description="Retrieve the contents of a file",
        arguments=[
            types.PromptArgument(
                name="path",
                description="the path to the file",
                required=True,
            ),
        ],
    ),
]


class PromptProvider:
    """Resolves prompts and completes their arguments."""

    def __init__(self, operations: FileOperations):
        self.operations = operations

    def list_prompts(self) -> List[types.Prompt]:
        return list(PROMPTS)

    async def get_prompt(
        self, name: str, arguments: Optional[Dict[str, str]] = None
    ) -> types.GetPromptResult:
        """Render a prompt.

        Args:
            name: Prompt name
            arguments: Prompt arguments; ``file-contents`` needs ``path``

        Returns:
            The file's full text wrapped as a single user message

        Raises:
            ValueError: If the prompt is unknown, the path is missing or
                        empty, or the file cannot be read
        """
        try:
            PromptName(name)
        except ValueError:
            raise ValueError(f"Prompt '{name}' not implemented")

        path = (arguments or {}).get("path")
        if not isinstance(path, str) or len(path) == 0:
            raise ValueError(f"Invalid path: {path}")

        try:
            contents = await self.operations.read_file(path)
        except (OSError, ValueError) as e:
            raise ValueError(f"Failed to read file: {e}")

        return types.GetPromptResult(
            description=f"Contents of {path}",
            messages=[
                types.PromptMessage(
                    role="user",
                    content=types.TextContent(type="text", text=contents),
                ),
            ],
        )

    async def complete(
        self,
        ref: Union[types.PromptReference, types.ResourceTemplateReference],
        argument: types.CompletionArgument,
    ) -> types.Completion:
        """Suggest file paths for the ``path`` argument of ``file-contents``.

        Every file whose relative path contains the typed value, ignoring
        case, is returned in walk order. There is no result limit.

        Raises:
            ValueError: If the reference is not the ``file-contents`` prompt
        """
        if getattr(ref, "name", None) != PromptName.FILE_CONTENTS.value:
            raise ValueError("Unknown prompt")

        query = argument.value.lower()
        files = await self.operations.list_files_recursively()

        return types.Completion(values=[f for f in files if query in f.lower()])
