"""Environment configuration for the Atlassian MCP server.

Jira and Confluence each take a host, an account email and an API token.
Every Confluence value falls back to its Jira counterpart, so a single Atlassian
Cloud site only needs the three JIRA_* variables.

Values are read from the process environment on every call; nothing here
caches credentials or headers between tool invocations.
"""
import base64
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .errors import MissingConfigurationError

logger = logging.getLogger("atlassian-mcp.config")

JIRA_HOST = "JIRA_HOST"
JIRA_EMAIL = "JIRA_EMAIL"
JIRA_API_TOKEN = "JIRA_API_TOKEN"
CONFLUENCE_HOST = "CONFLUENCE_HOST"
CONFLUENCE_EMAIL = "CONFLUENCE_EMAIL"
CONFLUENCE_API_TOKEN = "CONFLUENCE_API_TOKEN"

# src/atlassian_mcp/config.py -> project root
PROJECT_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class AtlassianCredentials(BaseModel):
    """Host and Basic-auth identity for one Atlassian Cloud product."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1, description="Site host, e.g. acme.atlassian.net")
    email: str = Field(..., min_length=1)
    api_token: str = Field(..., min_length=1, repr=False)

    def authorization_header(self) -> str:
        """Build a Basic authorization header value for Atlassian APIs."""
        raw = f"{self.email}:{self.api_token}".encode("utf-8")
        encoded = base64.b64encode(raw).decode("ascii")
        return f"Basic {encoded}"

    def request_headers(self) -> dict[str, str]:
        return {
            "Authorization": self.authorization_header(),
            "Accept": "application/json",
        }


def _env(name: str) -> Optional[str]:
    # Empty strings count as unset so fallbacks still apply.
    return os.getenv(name) or None


def jira_credentials() -> AtlassianCredentials:
    """Resolve Jira credentials from JIRA_HOST, JIRA_EMAIL and JIRA_API_TOKEN."""
    host = _env(JIRA_HOST)
    if not host:
        raise MissingConfigurationError(f"{JIRA_HOST} env var is required", [JIRA_HOST])

    email = _env(JIRA_EMAIL)
    token = _env(JIRA_API_TOKEN)
    if not email or not token:
        raise MissingConfigurationError(
            f"{JIRA_EMAIL} and {JIRA_API_TOKEN} env vars are required",
            [JIRA_EMAIL, JIRA_API_TOKEN],
        )

    return AtlassianCredentials(host=host, email=email, api_token=token)


def confluence_credentials() -> AtlassianCredentials:
    """Resolve Confluence credentials, falling back to the Jira values.

    CONFLUENCE_HOST -> JIRA_HOST, CONFLUENCE_EMAIL -> JIRA_EMAIL,
    CONFLUENCE_API_TOKEN -> JIRA_API_TOKEN.
    """
    host = _env(CONFLUENCE_HOST) or _env(JIRA_HOST)
    if not host:
        raise MissingConfigurationError(
            f"{CONFLUENCE_HOST} env var is required", [CONFLUENCE_HOST, JIRA_HOST]
        )

    email = _env(CONFLUENCE_EMAIL) or _env(JIRA_EMAIL)
    token = _env(CONFLUENCE_API_TOKEN) or _env(JIRA_API_TOKEN)
    if not email or not token:
        raise MissingConfigurationError(
            f"{CONFLUENCE_EMAIL} and {CONFLUENCE_API_TOKEN} env vars are required",
            [CONFLUENCE_EMAIL, CONFLUENCE_API_TOKEN, JIRA_EMAIL, JIRA_API_TOKEN],
        )

    return AtlassianCredentials(host=host, email=email, api_token=token)


def get_log_level() -> str:
    """Get logging level name, default 'INFO'."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def load_environment(env_file: Optional[Path] = None) -> bool:
    """Load a .env file into the process environment without overriding it.

    Looks for the project root .env first, then searches upward from the
    current working directory. Returns True if any variables were loaded.
    """
    if env_file is None:
        env_file = PROJECT_ENV_FILE if PROJECT_ENV_FILE.is_file() else find_dotenv(usecwd=True)

    if not env_file:
        logger.info("No .env file found, using process environment only")
        return False

    loaded = load_dotenv(env_file, override=False)
    logger.info(f"Loaded environment from {env_file}")
    return loaded
