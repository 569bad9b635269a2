"""Tests for the MCP server tool definitions."""

from __future__ import annotations

import pytest

from contentql.mcp.server import create_mcp_server
from contentql.source.memory import InMemoryContentSource


class TestMcpServer:
    def test_creates_server(self, source: InMemoryContentSource) -> None:
        server = create_mcp_server(source)
        assert server.name == "contentql"

    @pytest.mark.asyncio
    async def test_server_has_tools(self, source: InMemoryContentSource) -> None:
        tools = await create_mcp_server(source).get_tools()
        assert {"query", "plan"} <= set(tools)

    @pytest.mark.asyncio
    async def test_query_tool_resolves_document(self, source: InMemoryContentSource) -> None:
        tools = await create_mcp_server(source).get_tools()
        result = await tools["query"].fn(document={"author": ["name"]})  # type: ignore[attr-defined]
        assert result["author"]["nodes"] == [{"name": "Ada"}]

    @pytest.mark.asyncio
    async def test_plan_tool_reports_malformed_documents(self, source: InMemoryContentSource) -> None:
        tools = await create_mcp_server(source).get_tools()
        result = await tools["plan"].fn(document={})  # type: ignore[attr-defined]
        assert "error" in result
