"""Static provider and source configuration.

PROJECT_CONFIGS describes where each BF2 project hosts its ASPX backend.
SOURCE_CONFIGS describes how each ASPX endpoint is requested and how its
datasets map onto the translated response.
"""

from pydantic import Field

from bf2_jsonifier.models.common import AspxRecord, JsonifierBase, Project, Source
from bf2_jsonifier.models.responses import (
    AwardsInfoResponse,
    LeaderboardResponse,
    PlayerInfoResponse,
    PlayerSearchResponse,
    RankInfoResponse,
    UnlocksInfoResponse,
)

GAMESPY_USER_AGENT = "GameSpyHTTP/1.0"


class ProjectConfig(JsonifierBase):
    """Upstream location and request headers for one project."""

    base_url: str
    default_headers: dict[str, str] = Field(default_factory=dict)


class SourceConfig(JsonifierBase):
    """Request and translation schema for one ASPX endpoint."""

    endpoint: str
    required_params: tuple[str, ...] = ()
    default_params: dict[str, str] = Field(default_factory=dict)
    property_keys: tuple[str, ...] = ()
    force_return_array: bool = False
    groupable: bool = False
    response_model: type[AspxRecord]


PROJECT_CONFIGS: dict[Project, ProjectConfig] = {
    Project.BF2HUB: ProjectConfig(
        base_url="http://official.ranking.bf2hub.com/ASP/",
        default_headers={
            "User-Agent": GAMESPY_USER_AGENT,
            "Host": "BF2web.gamespy.com",
        },
    ),
    Project.PLAYBF2: ProjectConfig(
        base_url="http://bf2web.playbf2.ru/ASP/",
        default_headers={"User-Agent": GAMESPY_USER_AGENT},
    ),
    Project.PHOENIX: ProjectConfig(
        base_url="http://bf2.phoenixnetwork.net/ASP/",
        default_headers={"User-Agent": GAMESPY_USER_AGENT},
    ),
}

# Stat keys requested from getplayerinfo unless the caller overrides "info".
PLAYER_INFO_KEYS = ",".join([
    "per*", "cmb*", "twsc", "cpcp", "cacp", "dfcp", "kila", "heal", "rviv",
    "rsup", "rpar", "tgte", "dkas", "dsab", "cdsc", "rank", "cmsc", "kick",
    "kill", "deth", "suic", "ospm", "klpm", "klpr", "dtpr", "bksk", "wdsk",
    "bbrs", "tcdr", "ban", "dtpm", "lbtl", "osaa", "vrk", "tsql", "tsqm",
    "tlwf", "mvks", "vmks", "mvn*", "vmr*", "fkit", "fmap", "fveh", "fwea",
    "wtm-", "wkl-", "wdt-", "wac-", "wkd-",
    "vtm-", "vkl-", "vdt-", "vkd-", "vkr-",
    "atm-", "awn-", "alo-", "abr-",
    "ktm-", "kkl-", "kdt-", "kkd-",
])

SOURCE_CONFIGS: dict[Source, SourceConfig] = {
    Source.GETPLAYERINFO: SourceConfig(
        endpoint="getplayerinfo.aspx",
        required_params=("pid",),
        default_params={"info": PLAYER_INFO_KEYS},
        property_keys=("player",),
        groupable=True,
        response_model=PlayerInfoResponse,
    ),
    Source.GETRANKINFO: SourceConfig(
        endpoint="getrankinfo.aspx",
        required_params=("pid",),
        response_model=RankInfoResponse,
    ),
    Source.GETAWARDSINFO: SourceConfig(
        endpoint="getawardsinfo.aspx",
        required_params=("pid",),
        property_keys=("awards",),
        response_model=AwardsInfoResponse,
    ),
    Source.GETUNLOCKSINFO: SourceConfig(
        endpoint="getunlocksinfo.aspx",
        required_params=("pid",),
        property_keys=("status", "unlocks"),
        response_model=UnlocksInfoResponse,
    ),
    Source.GETLEADERBOARD: SourceConfig(
        endpoint="getleaderboard.aspx",
        default_params={"type": "score", "id": "overall"},
        property_keys=("players",),
        force_return_array=True,
        response_model=LeaderboardResponse,
    ),
    Source.SEARCHFORPLAYERS: SourceConfig(
        endpoint="searchforplayers.aspx",
        required_params=("nick",),
        property_keys=("players",),
        force_return_array=True,
        response_model=PlayerSearchResponse,
    ),
}


def get_source_config(name: str) -> SourceConfig | None:
    """Look up a source by its public name; None if unknown."""
    try:
        return SOURCE_CONFIGS[Source(name)]
    except ValueError:
        return None


def get_project_config(name: str | None, default: Project) -> ProjectConfig:
    """Look up a project by name, falling back to the default project."""
    try:
        return PROJECT_CONFIGS[Project(name)]
    except ValueError:
        return PROJECT_CONFIGS[default]
