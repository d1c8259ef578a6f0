"""Free Company (FC) profile models."""

import logging

from pydantic import Field, field_validator

from xivapi.models.base import U8, U16, U32, Percent, XIVModel

logger = logging.getLogger(__name__)


class FcEstate(XIVModel):
    """Info about an FC's estate."""

    greeting: str
    name: str
    plot: str


class FcFocus(XIVModel):
    """An activity an FC focuses on."""

    icon: str
    name: str
    status: bool


class FcSeeking(XIVModel):
    """A role an FC is recruiting for."""

    icon: str
    name: str
    status: bool


class FcRanking(XIVModel):
    """An FC's weekly and monthly ranking; null while unranked."""

    monthly: U32 | None = None
    weekly: U32 | None = None

    @field_validator("monthly", "weekly", mode="before")
    @classmethod
    def accept_legacy_string(cls, v: object) -> object:
        """Decode the older string form of rankings ("12", "--")."""
        if not isinstance(v, str):
            return v
        stripped = v.strip()
        logger.warning(
            "FC ranking sent as string %r; decoding with the legacy format", v
        )
        if not stripped.strip("-"):
            return None
        try:
            return int(stripped)
        except ValueError as e:
            raise ValueError(f"ranking {v!r} is not a number") from e


class FcReputation(XIVModel):
    """An FC's standing with one of the Grand Companies."""

    name: str
    progress: Percent = Field(..., description="Progress towards the next rank, in percent")
    rank: str


class FreeCompany(XIVModel):
    """Information about a Free Company."""

    id: str = Field(..., alias="ID", description="Lodestone FC ID")
    name: str
    tag: str
    slogan: str
    server: str
    dc: str = Field(..., alias="DC", description="Data center")
    active: str = Field(..., description="Activity times description")
    active_member_count: U16
    rank: U8
    formed: U32 = Field(..., description="Unix time the FC was formed")
    crest: list[str] = Field(..., description="Crest layer image URLs, bottom first")
    estate: FcEstate | None = None
    focus: list[FcFocus]
    seeking: list[FcSeeking]
    grand_company: str
    ranking: FcRanking
    recruitment: str
    reputation: list[FcReputation]
    parse_date: U32
