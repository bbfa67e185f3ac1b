"""MCP tool handlers for Jira and Confluence.

All handlers follow a consistent pattern:
- Accept: arguments dict and an httpx.AsyncClient
- Resolve credentials and the request URL, perform one GET, format the payload
- Return: list[TextContent] with a single text block

Failures never propagate to the MCP transport. Whatever goes wrong (missing
configuration or input, network error, non-2xx status, unexpected payload) is
logged and returned as "<failure prefix>: <message>" text.
"""
from typing import Any, Callable, Optional
import logging

import httpx
from mcp.types import TextContent

from . import config
from . import formatters
from .config import AtlassianCredentials
from .queries import DocQuery, IssueQuery

logger = logging.getLogger("atlassian-mcp.handlers")

JIRA_FAILURE_PREFIX = "Failed to fetch Jira issues"
CONFLUENCE_FAILURE_PREFIX = "Failed to fetch Confluence docs"

RequestTarget = Callable[[], tuple[AtlassianCredentials, str]]
Formatter = Callable[[Any], str]
ServerMessage = Callable[[Exception], Optional[str]]


def _log_failure(failure_prefix: str, url: Optional[str], error: Exception) -> None:
    logger.error(f"{failure_prefix}:")
    logger.error(f"  Error type: {type(error).__name__}")
    logger.error(f"  Error message: {error}")
    if url:
        logger.error(f"  URL: {url}")
    if isinstance(error, httpx.HTTPStatusError):
        logger.error(f"  Status: {error.response.status_code}")
        logger.error(f"  Response text: {error.response.text}")


async def fetch_and_format(
    client: httpx.AsyncClient,
    target: RequestTarget,
    formatter: Formatter,
    *,
    failure_prefix: str,
    server_message: ServerMessage,
) -> list[TextContent]:
    """Perform one authenticated GET and format the JSON payload as text.

    Args:
        client: HTTP client for this invocation.
        target: Returns (credentials, url). May raise precondition errors, in
            which case no request is made.
        formatter: Turns the decoded JSON payload into the result text.
        failure_prefix: Leading text of the failure message.
        server_message: Extracts preferred error text from a failed response.

    Returns:
        A single TextContent holding either the formatted payload or
        "<failure_prefix>: <message>".
    """
    url = None
    try:
        credentials, url = target()
        response = await client.get(url, headers=credentials.request_headers())
        response.raise_for_status()
        text = formatter(response.json())
    except Exception as e:
        _log_failure(failure_prefix, url, e)
        message = server_message(e) or str(e) or type(e).__name__
        text = f"{failure_prefix}: {message}"

    return [TextContent(type="text", text=text)]


# ============================================================================
# Jira Handlers
# ============================================================================

async def handle_get_jira_issues(
    arguments: dict,
    client: httpx.AsyncClient,
) -> list[TextContent]:
    """Search Jira issues with an optional JQL filter.

    RETURNS:
    • JSON array of {key, summary, description}, in Jira's result order
    • description is Jira's Atlassian Document Format object (or null)
    """
    def target() -> tuple[AtlassianCredentials, str]:
        query = IssueQuery.from_arguments(arguments)
        credentials = config.jira_credentials()
        return credentials, query.build_url(credentials.host)

    content = await fetch_and_format(
        client,
        target,
        formatters.format_issues,
        failure_prefix=JIRA_FAILURE_PREFIX,
        server_message=formatters.jira_error_message,
    )
    logger.info(f"get_jira_issues completed (jql={arguments.get('jql')!r})")
    return content


# ============================================================================
# Confluence Handlers
# ============================================================================

async def handle_fetch_confluence_docs(
    arguments: dict,
    client: httpx.AsyncClient,
) -> list[TextContent]:
    """Fetch a Confluence page by ID, or search pages by text.

    COMMON PATTERNS:
    • Search → Details: fetch_confluence_docs(query="onboarding") → pick an id → fetch_confluence_docs(pageId="12345")

    RETURNS:
    • pageId: "Title: ...\\nContent (HTML):\\n..." for that page
    • query: JSON array of {id, title, content} for matching pages
    """
    doc_query: Optional[DocQuery] = None

    def target() -> tuple[AtlassianCredentials, str]:
        nonlocal doc_query
        doc_query = DocQuery.from_arguments(arguments)
        credentials = config.confluence_credentials()
        return credentials, doc_query.build_url(credentials.host)

    def formatter(payload: Any) -> str:
        if doc_query.by_id:
            return formatters.format_confluence_page(payload)
        return formatters.format_confluence_search(payload)

    content = await fetch_and_format(
        client,
        target,
        formatter,
        failure_prefix=CONFLUENCE_FAILURE_PREFIX,
        server_message=formatters.confluence_error_message,
    )
    logger.info(f"fetch_confluence_docs completed (pageId={arguments.get('pageId')!r}, query={arguments.get('query')!r})")
    return content
