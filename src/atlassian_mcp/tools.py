"""Shared MCP tool definitions for the Atlassian server.

This module provides the definitive list of tools exposed over MCP. Handler
names in server.HANDLERS must match the names declared here.
"""

from mcp.types import Tool


def get_tools() -> list[Tool]:
    """Get the list of all MCP tools for Jira and Confluence."""
    return [
        # ============================================================================
        # Jira Tools
        # ============================================================================
        Tool(
            name="get_jira_issues",
            description="Fetches Jira issues using an optional JQL query. "
                       "Returns a JSON array of {key, summary, description}. "
                       "Without jql, Jira's default search result set is returned.",
            inputSchema={
                "type": "object",
                "properties": {
                    "jql": {
                        "type": "string",
                        "description": "Optional JQL filter, e.g. 'project = DEMO AND status = \"In Progress\"'"
                    }
                }
            }
        ),
        # ============================================================================
        # Confluence Tools
        # ============================================================================
        Tool(
            name="fetch_confluence_docs",
            description="Fetches Confluence documentation by page ID or by text search. "
                       "With pageId, returns the page title and its storage-format HTML. "
                       "With query, returns a JSON array of {id, title, content} for matching pages. "
                       "pageId takes precedence when both are given; one of them is required.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Free-text search across Confluence pages"
                    },
                    "pageId": {
                        "type": "string",
                        "description": "ID of a specific Confluence page to fetch"
                    }
                }
            }
        ),
    ]
