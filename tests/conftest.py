"""Shared fixtures: a clean Atlassian environment and mock HTTP clients."""
import httpx
import pytest

ATLASSIAN_ENV_VARS = (
    "JIRA_HOST",
    "JIRA_EMAIL",
    "JIRA_API_TOKEN",
    "CONFLUENCE_HOST",
    "CONFLUENCE_EMAIL",
    "CONFLUENCE_API_TOKEN",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every Atlassian variable from the environment."""
    for name in ATLASSIAN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def jira_env(clean_env):
    """Only the Jira variables are set."""
    clean_env.setenv("JIRA_HOST", "acme.atlassian.net")
    clean_env.setenv("JIRA_EMAIL", "dev@acme.test")
    clean_env.setenv("JIRA_API_TOKEN", "jira-token")
    return clean_env


class RecordingTransport:
    """Builds AsyncClients whose requests are answered by a callback and recorded."""

    def __init__(self, respond):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))


@pytest.fixture
def mock_http():
    """Factory: mock_http(respond) -> RecordingTransport."""
    return RecordingTransport
