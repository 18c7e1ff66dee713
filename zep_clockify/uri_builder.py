"""
URI builder for the Clockify REST API.
"""

import logging
from urllib.parse import quote, urlsplit, urlunsplit

from .errors import InvalidURIError

logger = logging.getLogger(__name__)

API_VERSION = "v1"

DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}


class URIBuilder:
    """Creates all URIs for the Clockify REST API from a base URI."""

    def __init__(self, base_uri: str):
        """
        Initialize URI builder.

        Args:
            base_uri: Base URI of the API, e.g. https://api.clockify.me/api

        Raises:
            InvalidURIError: If base_uri has no scheme or host, or an invalid port
        """
        parts = urlsplit(base_uri)
        if not parts.scheme or not parts.hostname:
            raise InvalidURIError(f"URI must have a host: {base_uri!r}")
        try:
            port = parts.port
        except ValueError as e:
            raise InvalidURIError(f"Invalid port in URI {base_uri!r}: {e}") from e

        self._base = parts
        self._port = port or DEFAULT_PORTS.get(parts.scheme, 80)
        self.workspaces_uri = self._build("workspaces")

    @property
    def server_address(self) -> str:
        """The server address, i.e. HOST:PORT."""
        return f"{self._base.hostname}:{self._port}"

    def projects_uri(self, workspace_id: str) -> str:
        return self._build(f"workspaces/{quote(workspace_id, safe='')}/projects")

    def project_uri(self, workspace_id: str, project_id: str) -> str:
        return self._build(
            f"workspaces/{quote(workspace_id, safe='')}/projects/{quote(project_id, safe='')}"
        )

    def _build(self, path: str) -> str:
        base_path = self._base.path
        if base_path.endswith('/'):
            full_path = f"{base_path}{API_VERSION}/{path}"
        else:
            full_path = f"{base_path}/{API_VERSION}/{path}"

        return urlunsplit((self._base.scheme, self._base.netloc, full_path, self._base.query, ''))
