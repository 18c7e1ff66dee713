import pytest

from zep_clockify.errors import InvalidURIError
from zep_clockify.uri_builder import URIBuilder


@pytest.mark.parametrize("base", ["https://hello.world", "https://hello.world/"])
def test_workspaces_uri(base: str) -> None:
    assert URIBuilder(base).workspaces_uri == "https://hello.world/v1/workspaces"


def test_base_path_and_query_are_kept() -> None:
    uris = URIBuilder("https://api.clockify.me/api/?lang=de")

    assert uris.workspaces_uri == "https://api.clockify.me/api/v1/workspaces?lang=de"
    assert uris.projects_uri("ws1") == "https://api.clockify.me/api/v1/workspaces/ws1/projects?lang=de"
    assert uris.project_uri("ws1", "p 2") == "https://api.clockify.me/api/v1/workspaces/ws1/projects/p%202?lang=de"


def test_server_address() -> None:
    assert URIBuilder("https://hello.world/").server_address == "hello.world:443"
    assert URIBuilder("http://hello.world").server_address == "hello.world:80"
    assert URIBuilder("http://localhost:8080/api").server_address == "localhost:8080"


@pytest.mark.parametrize("base", ["hello.world", "/api", "https://"])
def test_rejects_uri_without_host(base: str) -> None:
    with pytest.raises(InvalidURIError):
        URIBuilder(base)


@pytest.mark.parametrize("base", ["https://h:99999/api", "https://h:abc/"])
def test_rejects_invalid_port(base: str) -> None:
    with pytest.raises(InvalidURIError, match="port"):
        URIBuilder(base)
