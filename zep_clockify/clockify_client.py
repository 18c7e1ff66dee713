"""
Client for the Clockify REST API.
Issues authenticated GET requests and decodes the JSON responses into models.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import requests

from .errors import RestAPIError
from .models import ClockifyProject, Workspace
from .uri_builder import URIBuilder

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.clockify.me/api/"


@dataclass
class ClockifyConfig:
    """Connection settings for Clockify."""
    api_key: str = field(repr=False)
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 30.0


class ClockifyClient:
    """A single connection to Clockify."""

    def __init__(self, config: ClockifyConfig, session: Optional[requests.Session] = None):
        """
        Initialize client.

        Args:
            config: Clockify connection settings
            session: HTTP session to use (a new one if None)

        Raises:
            InvalidURIError: If the configured endpoint is not a valid URI
        """
        self.config = config
        self.uris = URIBuilder(config.endpoint)
        self.session = session or requests.Session()
        self.session.headers.update({
            'X-Api-Key': config.api_key,
            'Accept': 'application/json',
        })
        logger.debug(f"Clockify client for {self.uris.server_address}")

    def get_workspaces(self) -> List[Workspace]:
        data = self._get(self.uris.workspaces_uri)
        return self._decode_list(data, Workspace.from_dict)

    def get_projects(self, workspace_id: str) -> List[ClockifyProject]:
        data = self._get(self.uris.projects_uri(workspace_id))
        return self._decode_list(data, ClockifyProject.from_dict)

    def get_project(self, workspace_id: str, project_id: str) -> ClockifyProject:
        data = self._get(self.uris.project_uri(workspace_id, project_id))
        try:
            return ClockifyProject.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise RestAPIError(f"Unexpected project payload: {e}") from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _get(self, uri: str) -> Any:
        """
        Issue an authenticated GET and decode the JSON body.

        Raises:
            RestAPIError: On transport failure, non-200 status or invalid JSON
        """
        logger.debug(f"GET {uri}")
        try:
            response = self.session.get(uri, timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {uri} failed: {e}")
            raise RestAPIError(f"Request to {uri} failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"GET {uri} returned HTTP {response.status_code}")
            raise RestAPIError(
                f"GET {uri} returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RestAPIError(f"Invalid JSON from {uri}: {e}", status_code=response.status_code) from e

    @staticmethod
    def _decode_list(data: Any, decode) -> list:
        if not isinstance(data, list):
            raise RestAPIError(f"Expected a JSON list, got {type(data).__name__}")
        try:
            return [decode(item) for item in data]
        except (KeyError, TypeError, AttributeError) as e:
            raise RestAPIError(f"Unexpected list item payload: {e}") from e
