"""Shared enums and base model used across bf2_jsonifier domain models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Project(StrEnum):
    """BF2 "revive" project operating an ASPX stats backend."""

    BF2HUB = "bf2hub"
    PLAYBF2 = "playbf2"
    PHOENIX = "phoenix"


class Source(StrEnum):
    """ASPX endpoint exposed through the gateway."""

    GETPLAYERINFO = "getplayerinfo"
    GETRANKINFO = "getrankinfo"
    GETAWARDSINFO = "getawardsinfo"
    GETUNLOCKSINFO = "getunlocksinfo"
    GETLEADERBOARD = "getleaderboard"
    SEARCHFORPLAYERS = "searchforplayers"


# --- Base model ---


class JsonifierBase(BaseModel):
    """Base model with common configuration for all bf2_jsonifier models."""

    model_config = ConfigDict(
        populate_by_name=True,
        protected_namespaces=(),
    )


class AspxRecord(JsonifierBase):
    """Record translated from an ASPX dataset.

    Attribute sets differ between providers and request parameters, so
    undeclared string fields are kept as extras.
    """

    model_config = ConfigDict(extra="allow")
