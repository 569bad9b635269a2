"""FastMCP server exposing contentql tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from contentql.core.document import QueryDocumentError, parse_query_document
from contentql.core.planner import plan as _plan
from contentql.core.planner import to_query_params
from contentql.core.ports.content_source import ContentSource
from contentql.core.resolve import QueryEngine


def create_mcp_server(source: ContentSource) -> FastMCP:
    """Create a FastMCP server wired to the given content source."""

    mcp = FastMCP("contentql", instructions="Resolve nested, paginated queries against Contentful.")
    engine = QueryEngine(source)

    @mcp.tool()
    async def query(document: dict[str, Any]) -> dict[str, Any]:
        """Resolve a query document, e.g. {"blog": {"params": {"limit": 4}, "select": ["title"]}}."""
        try:
            roots = parse_query_document(document)
        except QueryDocumentError as exc:
            return {"error": str(exc)}
        results = await engine.resolve(roots)
        return {key: result.to_dict() for key, result in results.items()}

    @mcp.tool()
    async def plan(document: dict[str, Any]) -> dict[str, Any]:
        """Show the request parameters each root of a query document would send."""
        try:
            roots = parse_query_document(document)
        except QueryDocumentError as exc:
            return {"error": str(exc)}
        return {root.key: to_query_params(_plan(root)) for root in roots}

    return mcp
