"""Atlassian MCP Server - Model Context Protocol integration.

This package exposes Jira issue search and Confluence documentation lookup
as MCP tools, enabling AI assistants to read from an Atlassian Cloud site.

Modules:
- server: stdio MCP server implementation
- config: Environment configuration and credentials
- queries: Tool inputs and REST URL construction
- formatters: Response formatting utilities
- tools: MCP tool definitions
- handlers: Tool implementation handlers
"""

__version__ = "0.1.0"

from . import formatters
from . import tools
from . import handlers

__all__ = ["formatters", "tools", "handlers", "__version__"]
