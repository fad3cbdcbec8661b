"""Netlify MCP Server package.

Exposes Netlify site management (create from GitHub, list, get, delete)
as MCP tools that Claude CLI (or any MCP-compatible client) can call
natively.

Usage::

    # As a module:
    NETLIFY_ACCESS_TOKEN=... python -m netlify_mcp

    # Or import and run:
    from netlify_mcp import main
    asyncio.run(main())
"""

from .server import main, run  # noqa: F401

__all__ = ["main", "run"]
