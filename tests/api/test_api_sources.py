"""Tests for the GET /{source} endpoint.

The upstream client is replaced by FakeAspxClient (see conftest.py).
"""

import pytest
from httpx import AsyncClient

from bf2_jsonifier.api.dependencies import get_aspx_client
from bf2_jsonifier.api.sources import missing_required_params
from bf2_jsonifier.config.settings import Settings
from bf2_jsonifier.models.common import Project
from bf2_jsonifier.models.sources import PROJECT_CONFIGS
from bf2_jsonifier.parsers.errors import SourceError

PLAYER_INFO = (
    "O\nH\tasof\nD\t1700000000\n"
    "H\tpid\tnick\tatm-0\tawn-0\n"
    "D\t45465736\tmr.foo\t3600\t4\n"
    "$\t80\t$"
)

SEARCH = (
    "O\nH\tasof\nD\t1700000000\n"
    "H\tn\tpid\tnick\tscore\n"
    "D\t1\t45465736\tmr.foo\t1200\n"
    "$\t60\t$"
)


# ===================================================================
# Request validation
# ===================================================================


class TestRequestValidation:
    """Unknown sources and missing params are rejected before fetching."""

    @pytest.mark.anyio
    async def test_unknown_source_returns_404(self, client: AsyncClient, fake_client) -> None:
        response = await client.get("/getfoo", params={"pid": "1"})
        assert response.status_code == 404
        assert response.json() == {"errors": ["Invalid source provided"]}
        assert fake_client.calls == []

    @pytest.mark.anyio
    async def test_missing_required_param_returns_422(self, client: AsyncClient) -> None:
        response = await client.get("/getplayerinfo")
        assert response.status_code == 422
        assert response.json() == {"errors": ["Missing required query string parameter(s)"]}

    @pytest.mark.anyio
    async def test_blank_required_param_returns_422(self, client: AsyncClient) -> None:
        response = await client.get("/searchforplayers", params={"nick": "   "})
        assert response.status_code == 422

    @pytest.mark.anyio
    async def test_search_ends_with_rejected(self, client: AsyncClient, fake_client) -> None:
        response = await client.get(
            "/searchforplayers", params={"nick": "foo", "where": "E"},
        )
        assert response.status_code == 422
        assert "where=e" in response.json()["errors"][0]
        assert fake_client.calls == []

    @pytest.mark.anyio
    async def test_leaderboard_has_no_required_params(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = SEARCH.replace("H\tasof\nD\t1700000000", "H\tsize\tasof\nD\t1\t1700000000")
        response = await client.get("/getleaderboard")
        assert response.status_code == 200

    def test_missing_required_params_helper(self) -> None:
        assert missing_required_params(("pid",), {"pid": " 1 "}) == []
        assert missing_required_params(("pid", "nick"), {"pid": ""}) == ["pid", "nick"]


# ===================================================================
# Successful translation
# ===================================================================


class TestTranslation:
    """Upstream text is returned as JSON."""

    @pytest.mark.anyio
    async def test_player_info(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = PLAYER_INFO
        response = await client.get("/getplayerinfo", params={"pid": "45465736"})
        assert response.status_code == 200
        data = response.json()
        assert data["asof"] == "1700000000"
        assert data["player"]["nick"] == "mr.foo"
        assert "grouped" not in data

    @pytest.mark.anyio
    async def test_cache_control_header(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = PLAYER_INFO
        response = await client.get("/getplayerinfo", params={"pid": "1"})
        assert response.headers["cache-control"] == "max-age=600"
        assert response.headers["content-type"] == "application/json"

    @pytest.mark.anyio
    async def test_group_values(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = PLAYER_INFO
        response = await client.get(
            "/getplayerinfo", params={"pid": "1", "groupValues": "1"},
        )
        data = response.json()
        assert data["grouped"] == {"armies": [{"id": 0, "tm": "3600", "wn": "4"}]}

    @pytest.mark.anyio
    async def test_search_returns_list(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = SEARCH
        response = await client.get("/searchforplayers", params={"nick": "mr.foo"})
        assert response.json()["players"] == [
            {"n": "1", "pid": "45465736", "nick": "mr.foo", "score": "1200"},
        ]

    @pytest.mark.anyio
    async def test_default_project(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = PLAYER_INFO
        await client.get("/getplayerinfo", params={"pid": "1"})
        project_config, _, _ = fake_client.calls[0]
        assert project_config == PROJECT_CONFIGS[Project.BF2HUB]

    @pytest.mark.anyio
    async def test_selected_project(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = PLAYER_INFO
        await client.get("/getplayerinfo", params={"pid": "1", "project": "phoenix"})
        project_config, _, params = fake_client.calls[0]
        assert project_config == PROJECT_CONFIGS[Project.PHOENIX]
        assert params["pid"] == "1"

    @pytest.mark.anyio
    async def test_unknown_project_falls_back(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = PLAYER_INFO
        await client.get("/getplayerinfo", params={"pid": "1", "project": "nope"})
        project_config, _, _ = fake_client.calls[0]
        assert project_config == PROJECT_CONFIGS[Project.BF2HUB]


# ===================================================================
# Failures
# ===================================================================


class TestFailures:
    """Typed failures map to status codes with an errors body."""

    @pytest.mark.anyio
    async def test_player_not_found_returns_404(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = "E\t998"
        response = await client.get("/getplayerinfo", params={"pid": "1"})
        assert response.status_code == 404
        assert response.json() == {"errors": ["Player not found"]}
        assert "cache-control" not in response.headers

    @pytest.mark.anyio
    async def test_source_error_returns_500(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = "E\t107"
        response = await client.get("/getrankinfo", params={"pid": "1"})
        assert response.status_code == 500
        assert response.json() == {"errors": ["Source query resulted in an error"]}

    @pytest.mark.anyio
    async def test_unreachable_upstream_returns_500(self, client: AsyncClient, fake_client) -> None:
        fake_client.error = SourceError("Error querying source")
        response = await client.get("/getrankinfo", params={"pid": "1"})
        assert response.status_code == 500
        assert response.json() == {"errors": ["Error querying source"]}

    @pytest.mark.anyio
    async def test_malformed_list_returns_500(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = "O\nH\tsize\tasof\n$\t10\t$"
        response = await client.get("/getleaderboard", params={"id": "risingstar"})
        assert response.status_code == 500
        assert response.json() == {"errors": ["Source returned invalid response"]}

    @pytest.mark.anyio
    async def test_structure_error_returns_500(self, client: AsyncClient, fake_client) -> None:
        fake_client.body = "O\nD\t1"
        response = await client.get("/getrankinfo", params={"pid": "1"})
        assert response.status_code == 500


class TestDependencies:
    """get_aspx_client honours UPSTREAM_TIMEOUT."""

    def test_client_timeout_from_settings(self) -> None:
        client = get_aspx_client(Settings(UPSTREAM_TIMEOUT=2.5))
        assert client.timeout == 2.5
