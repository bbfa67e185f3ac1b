"""Exceptions raised while preparing or interpreting an Atlassian request.

None of these escape a tool handler: they are caught at the handler boundary
and rendered as the failure text returned to the MCP client.
"""


class AtlassianToolError(Exception):
    """Base class for tool-level failures that are not transport errors."""


class MissingConfigurationError(AtlassianToolError):
    """Raised when a required environment variable is not set."""

    def __init__(self, message: str, variables: list[str]):
        super().__init__(message)
        self.variables = variables


class MissingDiscoveryInputError(AtlassianToolError):
    """Raised when a Confluence lookup has neither a page id nor a query."""


class MalformedResponseError(AtlassianToolError):
    """Raised when a response body lacks the collection a formatter needs."""

    def __init__(self, message: str, expected_field: str):
        super().__init__(message)
        self.expected_field = expected_field
