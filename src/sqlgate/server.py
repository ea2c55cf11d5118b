"""MCP server exposing the guarded `select` tool and the `schema` tool over stdio."""

from __future__ import annotations

import json
import logging

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from sqlgate.adapters._base import ConnectionConfig, DatabaseAdapter
from sqlgate.adapters._registry import get_adapter
from sqlgate.tools import ToolFailure, schema_tool, select_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "MySQL-MCP"

SELECT_DESCRIPTION = (
    "Execute a SELECT SQL query on the MySQL database and return the results. "
    "Only SELECT queries are allowed for security reasons."
)

SCHEMA_DESCRIPTION = (
    "Get table and column definitions plus foreign-key relationships. "
    "Optionally narrow to one table name or to tables whose name contains a keyword."
)


def create_server(adapter: DatabaseAdapter, *, db: str | None = None) -> FastMCP:
    """Build a FastMCP server whose tools run against an already connected adapter."""
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="select", description=SELECT_DESCRIPTION)
    async def select(query: str) -> str:
        result = await select_tool(adapter, query, db=db)
        if isinstance(result, ToolFailure):
            raise ToolError(result.message)
        return json.dumps(result, indent=2, default=str)

    @mcp.tool(name="schema", description=SCHEMA_DESCRIPTION)
    async def schema(table_name: str | None = None, keyword: str | None = None) -> str:
        result = await schema_tool(adapter, table_name=table_name, keyword=keyword)
        if isinstance(result, ToolFailure):
            raise ToolError(result.message)
        return json.dumps(result, indent=2, default=str)

    return mcp


async def serve(config: ConnectionConfig) -> None:
    """Connect, serve MCP over stdio until the client goes away, then disconnect.

    Raises AdapterError if the adapter cannot be loaded or cannot connect.
    """
    adapter = get_adapter(config.db_type)()
    await adapter.connect(config)
    try:
        server = create_server(adapter, db=config.name)
        logger.info('%s server is running. Use the "select" tool to execute SQL queries.', SERVER_NAME)
        await server.run_stdio_async()
    finally:
        logger.info("Shutting down %s server...", SERVER_NAME)
        await adapter.close()
