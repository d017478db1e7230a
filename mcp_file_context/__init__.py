"""MCP File Context Server.

A Model Context Protocol server that exposes the files under a directory as
resources, tools and a prompt.
"""

__version__ = "0.1.0"

from .server import RequestKind, create_server, serve

__all__ = ["RequestKind", "create_server", "serve"]
