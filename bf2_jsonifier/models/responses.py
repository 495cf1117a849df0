"""Typed response variants, one per ASPX source.

Field sets mirror what the providers return for the default request
parameters. All values stay strings as sent upstream, except grouped
stat ids which are parsed indices.
"""

from pydantic import Field

from bf2_jsonifier.models.common import AspxRecord, JsonifierBase


# ---------------------------------------------------------------------------
# Grouped player stats
# ---------------------------------------------------------------------------


class GroupedStat(AspxRecord):
    """Stats sharing one numeric index within a category."""

    id: int


class ArmyStats(GroupedStat):
    tm: str | None = None
    wn: str | None = None
    lo: str | None = None
    br: str | None = None


class ClassStats(GroupedStat):
    tm: str | None = None
    kl: str | None = None
    dt: str | None = None
    kd: str | None = None


class VehicleStats(GroupedStat):
    tm: str | None = None
    kl: str | None = None
    dt: str | None = None
    kd: str | None = None
    kr: str | None = None


class WeaponStats(GroupedStat):
    tm: str | None = None
    kl: str | None = None
    dt: str | None = None
    ac: str | None = None
    kd: str | None = None


class MapStats(GroupedStat):
    tm: str | None = None
    wn: str | None = None
    ls: str | None = None


class GroupedPlayerStats(JsonifierBase):
    """Per-category grouped stats. None means no key of that category was sent."""

    armies: list[ArmyStats] | None = None
    classes: list[ClassStats] | None = None
    vehicles: list[VehicleStats] | None = None
    weapons: list[WeaponStats] | None = None
    maps: list[MapStats] | None = None


# ---------------------------------------------------------------------------
# Source responses
# ---------------------------------------------------------------------------


class PlayerInfoResponse(AspxRecord):
    asof: str
    player: dict[str, str] | list[dict[str, str]]
    grouped: GroupedPlayerStats | None = None


class RankInfoResponse(AspxRecord):
    rank: str
    chng: str
    decr: str


class Award(AspxRecord):
    award: str
    level: str
    when: str
    first: str


class AwardsInfoResponse(AspxRecord):
    pid: str
    asof: str
    awards: Award | list[Award] = Field(default_factory=list)


class UnlockStatus(AspxRecord):
    enlisted: str
    officer: str


class Unlock(AspxRecord):
    id: str
    state: str


class UnlocksInfoResponse(AspxRecord):
    pid: str
    nick: str
    asof: str
    status: UnlockStatus | list[UnlockStatus] | None = None
    unlocks: Unlock | list[Unlock] = Field(default_factory=list)


class LeaderboardEntry(AspxRecord):
    """Leaderboard row. Only these attributes are common to every leaderboard."""

    n: str
    pid: str
    nick: str


class LeaderboardResponse(AspxRecord):
    size: str
    asof: str
    players: list[LeaderboardEntry]


class PlayerSearchEntry(AspxRecord):
    n: str
    pid: str
    nick: str
    score: str


class PlayerSearchResponse(AspxRecord):
    asof: str
    players: list[PlayerSearchEntry]


AspxResponse = (
    PlayerInfoResponse
    | RankInfoResponse
    | AwardsInfoResponse
    | UnlocksInfoResponse
    | LeaderboardResponse
    | PlayerSearchResponse
)
