"""Extra-data selectors accepted by character and FC lookups."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from xivapi.utils.exceptions import InvalidSelector


class ExtraData(Enum):
    """Optional sections a lookup can ask XIVAPI to include."""

    ACHIEVEMENTS = "achievements"
    FRIENDS = "friends"
    FREE_COMPANY = "free-company"
    FREE_COMPANY_MEMBERS = "free-company-members"
    MINIONS = "minions"
    MOUNTS = "mounts"
    PVP_TEAM = "pvp-team"

    @property
    def token(self) -> str:
        """Upstream `data=` token for this selector."""
        return _TOKENS[self]

    @classmethod
    def parse(cls, value: ExtraData | str) -> ExtraData:
        """Resolve a member, its value, its name or its upstream token.

        Raises:
            InvalidSelector: If `value` names no known selector
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key.lower() in (member.value, member.name.lower()):
                    return member
            # MINIONS and MOUNTS share a token; resolve it to the first.
            for member in cls:
                if key.upper() == member.token:
                    return member
        raise InvalidSelector(value)


_TOKENS = {
    ExtraData.ACHIEVEMENTS: "AC",
    ExtraData.FRIENDS: "FR",
    ExtraData.FREE_COMPANY: "FC",
    ExtraData.FREE_COMPANY_MEMBERS: "FCM",
    ExtraData.MINIONS: "MIMO",
    ExtraData.MOUNTS: "MIMO",
    ExtraData.PVP_TEAM: "PVP",
}


def selector_tokens(selectors: Iterable[ExtraData | str] | None) -> list[str]:
    """Validate selectors and return their distinct tokens in request order.

    Raises:
        InvalidSelector: On the first unknown selector
    """
    if selectors is None:
        return []
    if isinstance(selectors, (str, ExtraData)):
        selectors = [selectors]
    tokens: list[str] = []
    for selector in selectors:
        token = ExtraData.parse(selector).token
        if token not in tokens:
            tokens.append(token)
    return tokens
