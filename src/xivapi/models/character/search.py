"""Character summary returned by searches and member lists."""

from pydantic import Field

from xivapi.models.base import U32, XIVModel
from xivapi.models.pagination import SearchResults


class CharacterSearch(XIVModel):
    """Summary of a character, as returned by searches and member lists."""

    avatar: str = Field(..., description="Avatar image URL")
    feast_matches: U32 = Field(..., description="Feast matches played")
    id: U32 = Field(..., alias="ID", description="Lodestone character ID")
    lang: str | None = Field(None, description="Language code")
    name: str
    rank: str | None = Field(None, description="Company rank name")
    rank_icon: str | None = Field(None, description="Company rank icon URL")
    server: str


CharacterSearchResults = SearchResults[CharacterSearch]
