"""Character profile and search models."""

from pydantic import Field

from xivapi.models.base import U8, U32, XIVModel
from xivapi.models.freecompany.company import FreeCompany

from .achievements import Achievement, CharacterAchievements
from .class_job import Class, ClassBozjan, ClassElemental, UnlockedState
from .gear import Gear, GearPiece, GearSet
from .search import CharacterSearch, CharacterSearchResults


class GrandCompany(XIVModel):
    """Grand Company allegiance and rank."""

    name_id: U8 = Field(..., alias="NameID")
    rank_id: U8 = Field(..., alias="RankID")


class Mimo(XIVModel):
    """A mount or minion."""

    icon: str
    name: str


class Character(XIVModel):
    """A detailed character profile."""

    id: U32 = Field(..., alias="ID", description="Lodestone character ID")
    name: str
    server: str
    dc: str = Field(..., alias="DC", description="Data center")
    lang: str | None = None
    avatar: str
    portrait: str
    bio: str
    nameday: str
    gender: U8
    race: U8
    tribe: U8
    town: U8
    title: U32
    title_top: bool = Field(..., description="Whether the title is shown above the name")
    active_class_job: Class
    class_jobs: list[Class]
    class_jobs_bozjan: ClassBozjan
    class_jobs_elemental: ClassElemental
    gear_set: GearSet
    grand_company: GrandCompany
    free_company_id: str | None = Field(..., description="Null when not in a company")
    free_company_name: str | None = Field(..., description="Null when not in a company")
    pvp_team_id: str | None = Field(None, alias="PvPTeamId")
    parse_date: U32 = Field(..., description="Unix time the profile was parsed")


class CharacterResult(XIVModel):
    """Everything returned by a character lookup.

    Sections other than `character` are absent unless requested and public;
    an absent section is distinct from an empty one.
    """

    character: Character
    achievements: CharacterAchievements | None = None
    achievements_public: bool | None = None
    friends: list[CharacterSearch] | None = None
    friends_public: bool | None = None
    free_company: FreeCompany | None = None
    free_company_members: list[CharacterSearch] | None = None
    minions: list[Mimo] | None = None
    mounts: list[Mimo] | None = None
    pvp_team: str | None = Field(None, alias="PvPTeam")


__all__ = [
    "Achievement",
    "Character",
    "CharacterAchievements",
    "CharacterResult",
    "CharacterSearch",
    "CharacterSearchResults",
    "Class",
    "ClassBozjan",
    "ClassElemental",
    "Gear",
    "GearPiece",
    "GearSet",
    "GrandCompany",
    "Mimo",
    "UnlockedState",
]
