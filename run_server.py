#!/usr/bin/env python
"""
Simple entry point to run the MCP file context server.
Usage: uv run run_server.py [directory]

For use with MCP Inspector or Claude Desktop:
- Command: uv
- Arguments: --directory /path/to/mcp-file-context run mcp-file-context

The server exposes the given directory, or the current directory if none
is given.
"""

import sys
from mcp_file_context.__main__ import app

if __name__ == "__main__":
    sys.exit(app())
