"""Tool inputs and the Jira/Confluence REST URLs they map to."""
from typing import Any, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from .errors import MissingDiscoveryInputError

JIRA_SEARCH_PATH = "/rest/api/3/search"
CONFLUENCE_CONTENT_PATH = "/wiki/rest/api/content"

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_."
_URI_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    """Percent-encode a single query value or path segment."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


class IssueQuery(BaseModel):
    """Optional JQL filter for a Jira issue search."""

    jql: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "IssueQuery":
        return cls(jql=arguments.get("jql"))

    def build_url(self, host: str) -> str:
        url = f"https://{host}{JIRA_SEARCH_PATH}"
        if self.jql:
            url += f"?jql={encode_component(self.jql)}"
        return url


class DocQuery(BaseModel):
    """Confluence lookup: exact page id or free-text search.

    A page id takes precedence when both are given.
    """

    model_config = ConfigDict(frozen=True)

    page_id: Optional[str] = None
    query: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "DocQuery":
        """Build from tool arguments (``pageId`` / ``query``).

        Raises:
            MissingDiscoveryInputError: if neither value is provided.
        """
        page_id = arguments.get("pageId")
        query = arguments.get("query")
        if not page_id and not query:
            raise MissingDiscoveryInputError("Either query or pageId must be provided")
        if page_id:
            return cls(page_id=page_id)
        return cls(query=query)

    @property
    def by_id(self) -> bool:
        return bool(self.page_id)

    def cql(self) -> str:
        return f'type=page AND text~"{self.query}"'

    def build_url(self, host: str) -> str:
        base = f"https://{host}{CONFLUENCE_CONTENT_PATH}"
        if self.by_id:
            return f"{base}/{encode_component(self.page_id)}?expand=body.storage,title"
        return f"{base}/search?cql={encode_component(self.cql())}&expand=title,body.storage"
