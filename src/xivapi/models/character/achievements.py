"""Achievement models, only returned when a character's achievements are public."""

from pydantic import Field

from xivapi.models.base import U32, XIVModel


class Achievement(XIVModel):
    id: U32 = Field(..., alias="ID")
    date: U32 = Field(..., description="Unix timestamp the achievement was earned")


class CharacterAchievements(XIVModel):
    """Unlocked achievements and the point total."""

    entries: list[Achievement] = Field(..., alias="List")
    points: U32
