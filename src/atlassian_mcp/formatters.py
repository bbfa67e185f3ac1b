"""Shared formatting functions for MCP responses.

Turns Jira and Confluence REST payloads into the compact text returned to the
MCP client, and pulls server-provided error text out of failed responses.
Missing fields are tolerated: they render as null or "No content".
"""
import json
from typing import Any, Optional

import httpx

from .errors import MalformedResponseError

NO_CONTENT = "No content"


def _to_json(records: list[dict]) -> str:
    return json.dumps(records, indent=2, ensure_ascii=False)


def _storage_body(entry: dict) -> Optional[str]:
    """Return body.storage.value from a Confluence content entity, if any."""
    body = entry.get("body") or {}
    storage = body.get("storage") or {}
    return storage.get("value")


def _require_list(payload: Any, field: str) -> list:
    items = payload.get(field) if isinstance(payload, dict) else None
    if not isinstance(items, list):
        raise MalformedResponseError(f"Response did not contain a '{field}' list", field)
    return items


def format_issue(issue: dict) -> dict:
    """Reduce a Jira issue to key, summary and description."""
    fields = issue.get("fields") or {}
    return {
        "key": issue.get("key"),
        "summary": fields.get("summary"),
        "description": fields.get("description"),
    }


def format_issues(payload: dict) -> str:
    """Format a Jira search response as a pretty-printed JSON array."""
    issues = _require_list(payload, "issues")
    return _to_json([format_issue(issue) for issue in issues])


def format_confluence_page(payload: dict) -> str:
    """Format a single Confluence page as title plus storage-format HTML."""
    title = payload.get("title") or ""
    body = _storage_body(payload) or NO_CONTENT
    return f"Title: {title}\nContent (HTML):\n{body}"


def format_confluence_result(result: dict) -> dict:
    return {
        "id": result.get("id"),
        "title": result.get("title"),
        "content": _storage_body(result) or NO_CONTENT,
    }


def format_confluence_search(payload: dict) -> str:
    """Format Confluence content search results as a pretty-printed JSON array."""
    results = _require_list(payload, "results")
    return _to_json([format_confluence_result(result) for result in results])


def _error_body(error: Exception) -> Optional[dict]:
    if not isinstance(error, httpx.HTTPStatusError):
        return None
    try:
        body = error.response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def jira_error_message(error: Exception) -> Optional[str]:
    """Join Jira's errorMessages list, if the failed response carried one."""
    body = _error_body(error)
    if not body:
        return None
    messages = body.get("errorMessages")
    if not isinstance(messages, list) or not messages:
        return None
    return ", ".join(str(message) for message in messages)


def confluence_error_message(error: Exception) -> Optional[str]:
    """Return Confluence's error ``message`` field, if the failed response carried one."""
    body = _error_body(error)
    if not body:
        return None
    message = body.get("message")
    return str(message) if message else None
