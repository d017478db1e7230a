"""Unit tests for the request router.

These tests check that every request kind is bound to exactly one handler
and that the server is built around an injected base directory.
"""

import tempfile
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from mcp import types

from mcp_file_context import __version__
from mcp_file_context.server import (
    SERVER_NAME,
    RequestHandlers,
    RequestKind,
    create_server,
)


@pytest.fixture
def test_fs():
    with tempfile.TemporaryDirectory() as temp_dir:
        base_dir = Path(temp_dir)
        (base_dir / "notes.txt").write_text("notes")
        yield base_dir


@pytest.fixture
def handlers(test_fs):
    return RequestHandlers(test_fs)


REQUEST_TYPES = {
    RequestKind.LIST_RESOURCES: types.ListResourcesRequest,
    RequestKind.READ_RESOURCE: types.ReadResourceRequest,
    RequestKind.LIST_TOOLS: types.ListToolsRequest,
    RequestKind.CALL_TOOL: types.CallToolRequest,
    RequestKind.LIST_PROMPTS: types.ListPromptsRequest,
    RequestKind.GET_PROMPT: types.GetPromptRequest,
    RequestKind.COMPLETE: types.CompleteRequest,
}


def test_request_kinds_are_protocol_methods():
    assert {kind.value for kind in RequestKind} == {
        "resources/list",
        "resources/read",
        "tools/list",
        "tools/call",
        "prompts/list",
        "prompts/get",
        "completion/complete",
    }


def test_every_kind_has_a_route(handlers):
    routed = {kind: handlers.route(kind) for kind in RequestKind}

    assert len(routed) == len(RequestKind)
    assert len({id(handler) for handler in routed.values()}) == len(RequestKind)


def test_components_share_base_directory(test_fs, handlers):
    assert handlers.base_dir == test_fs.resolve()
    assert handlers.catalog.operations is handlers.operations
    assert handlers.tools.operations is handlers.operations
    assert handlers.prompts.operations is handlers.operations


def test_invalid_base_directory_fails_at_construction(test_fs):
    with pytest.raises(ValueError, match="Not a directory"):
        create_server(test_fs / "missing")


def test_create_server_registers_all_request_kinds(test_fs):
    server = create_server(test_fs)

    assert server.name == SERVER_NAME
    assert server.version == __version__
    for kind, request_type in REQUEST_TYPES.items():
        assert request_type in server.request_handlers, kind


def test_capabilities_include_completions(test_fs):
    server = create_server(test_fs)
    options = server.create_initialization_options()

    assert options.capabilities.resources is not None
    assert options.capabilities.tools is not None
    assert options.capabilities.prompts is not None
    assert options.capabilities.completions is not None


@pytest.mark.asyncio
class TestRouting:
    async def test_call_tool_dispatches_to_invoker(self, handlers):
        handlers.tools.call_tool = AsyncMock(return_value=[])

        await handlers.route(RequestKind.CALL_TOOL)("read-file", {"path": "x"})

        handlers.tools.call_tool.assert_awaited_once_with("read-file", {"path": "x"})

    async def test_get_prompt_dispatches_to_provider(self, handlers):
        result = await handlers.route(RequestKind.GET_PROMPT)(
            "file-contents", {"path": "notes.txt"}
        )

        assert result.messages[0].content.text == "notes"

    async def test_complete_ignores_context(self, handlers):
        completion = await handlers.route(RequestKind.COMPLETE)(
            types.PromptReference(type="ref/prompt", name="file-contents"),
            types.CompletionArgument(name="path", value="NOTE"),
            None,
        )

        assert completion.values == ["notes.txt"]

    async def test_read_resource_accepts_url_objects(self, handlers):
        resources = await handlers.route(RequestKind.LIST_RESOURCES)()

        contents = await handlers.route(RequestKind.READ_RESOURCE)(resources[0].uri)

        assert contents[0].content == "notes"

    async def test_static_listings(self, handlers):
        tools = await handlers.route(RequestKind.LIST_TOOLS)()
        prompts = await handlers.route(RequestKind.LIST_PROMPTS)()

        assert [t.name for t in tools] == ["list-files", "read-file"]
        assert [p.name for p in prompts] == ["file-contents"]
