"""Pytest configuration and shared fixtures."""

import copy
import sys
from pathlib import Path

import pytest

# Add src to Python path so imports work
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from xivapi.utils.config import reset_config  # noqa: E402

CHARACTER_ID = 12345678
FREE_COMPANY_ID = "9232238498621155898"


def _class_job(class_id, job_id, level, name, unlocked_id=None):
    return {
        "ClassID": class_id,
        "ExpLevel": 1200,
        "ExpLevelMax": 5000,
        "ExpLevelTogo": 3800,
        "IsSpecialised": False,
        "JobID": job_id,
        "Level": level,
        "Name": name,
        "UnlockedState": {"ID": unlocked_id, "Name": name.split(" / ")[-1]},
    }


_CHARACTER_SEARCH = {
    "Pagination": {
        "Page": 1,
        "PageNext": None,
        "PagePrev": None,
        "PageTotal": 1,
        "Results": 1,
        "ResultsPerPage": 50,
        "ResultsTotal": 1,
    },
    "Results": [
        {
            "Avatar": "https://img2.finalfantasyxiv.com/f/avatar.jpg",
            "FeastMatches": 0,
            "ID": CHARACTER_ID,
            "Lang": "en",
            "Name": "Tami Pesagniyah",
            "Rank": None,
            "RankIcon": None,
            "Server": "Omega",
        }
    ],
}

_CHARACTER = {
    "ActiveClassJob": _class_job(19, 19, 90, "paladin / paladin", 19),
    "Avatar": "https://img2.finalfantasyxiv.com/f/avatar.jpg",
    "Bio": "-",
    "ClassJobs": [
        _class_job(1, 19, 90, "gladiator / paladin", 19),
        _class_job(8, 8, 80, "carpenter / carpenter", 8),
        _class_job(6, 24, 0, "conjurer / white mage"),
    ],
    "ClassJobsBozjan": {"Level": 25, "Mettle": 1203, "Name": "Resistance Rank"},
    "ClassJobsElemental": {
        "ExpLevel": 0,
        "ExpLevelMax": 0,
        "ExpLevelTogo": 0,
        "Level": None,
        "Name": "Elemental Level",
    },
    "DC": "Chaos",
    "FreeCompanyId": FREE_COMPANY_ID,
    "FreeCompanyName": "S E E S",
    "GearSet": {
        "Attributes": {"1": 2301, "2": 416, "3": 3410},
        "ClassID": 1,
        "Gear": {
            "Body": {
                "Creator": None,
                "Dye": 12,
                "ID": 40200,
                "Materia": [33932, 33932],
                "Mirage": 28550,
            },
            "MainHand": {
                "Creator": "Some Crafter",
                "Dye": None,
                "ID": 40150,
                "Materia": [],
                "Mirage": None,
            },
            "Ring1": {"Creator": None, "Dye": None, "ID": 40280, "Materia": [], "Mirage": None},
        },
        "GearKey": "1_19",
        "JobID": 19,
        "Level": 90,
    },
    "Gender": 2,
    "GrandCompany": {"NameID": 1, "RankID": 11},
    "ID": CHARACTER_ID,
    "Lang": None,
    "Name": "Tami Pesagniyah",
    "Nameday": "1st Sun of the 1st Astral Moon",
    "ParseDate": 1700000000,
    "Portrait": "https://img2.finalfantasyxiv.com/f/portrait.jpg",
    "PvPTeamId": None,
    "Race": 4,
    "Server": "Omega",
    "Title": 57,
    "TitleTop": False,
    "Town": 2,
    "Tribe": 8,
}

_FREE_COMPANY = {
    "Active": "Always",
    "ActiveMemberCount": 42,
    "Crest": [
        "https://img2.finalfantasyxiv.com/c/B0.png",
        "https://img2.finalfantasyxiv.com/c/F4.png",
        "https://img2.finalfantasyxiv.com/c/S5.png",
    ],
    "DC": "Chaos",
    "Estate": {"Greeting": "Welcome!", "Name": "Velvet Room", "Plot": "Plot 5, 12 Ward, Mist"},
    "Focus": [
        {"Icon": "https://img.finalfantasyxiv.com/focus/1.png", "Name": "Role-playing", "Status": False},
        {"Icon": "https://img.finalfantasyxiv.com/focus/2.png", "Name": "Leveling", "Status": True},
    ],
    "Formed": 1400000000,
    "GrandCompany": "Maelstrom",
    "ID": FREE_COMPANY_ID,
    "Name": "S E E S",
    "ParseDate": 1700000000,
    "Rank": 30,
    "Ranking": {"Monthly": 512, "Weekly": 88},
    "Recruitment": "Open",
    "Reputation": [
        {"Name": "Maelstrom", "Progress": 100, "Rank": "Allied"},
        {"Name": "Order of the Twin Adder", "Progress": 12, "Rank": "Neutral"},
        {"Name": "Immortal Flames", "Progress": 0, "Rank": "Neutral"},
    ],
    "Seeking": [
        {"Icon": "https://img.finalfantasyxiv.com/seeking/tank.png", "Name": "Tank", "Status": True},
    ],
    "Server": "Omega",
    "Slogan": "Memento mori",
    "Tag": "SEES",
}

_FREE_COMPANY_SEARCH = {
    "Pagination": {
        "Page": 1,
        "PageNext": 2,
        "PagePrev": None,
        "PageTotal": 2,
        "Results": 1,
        "ResultsPerPage": 50,
        "ResultsTotal": 51,
    },
    "Results": [
        {
            "Crest": ["https://img2.finalfantasyxiv.com/c/B0.png"],
            "ID": FREE_COMPANY_ID,
            "Name": "S E E S",
            "Server": "Omega",
        }
    ],
}


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep the config singleton and XIVAPI env vars isolated per test."""
    for var in ("XIVAPI_BASE_URL", "XIVAPI_PRIVATE_KEY", "XIVAPI_REQUEST_TIMEOUT", "APP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def character_search_payload():
    return copy.deepcopy(_CHARACTER_SEARCH)


@pytest.fixture
def character_payload():
    return copy.deepcopy(_CHARACTER)


@pytest.fixture
def character_result_payload(character_payload):
    """A lookup response with achievements and friends private."""
    return {
        "Achievements": None,
        "AchievementsPublic": False,
        "Character": character_payload,
        "FreeCompany": None,
        "FreeCompanyMembers": None,
        "Friends": None,
        "FriendsPublic": False,
        "Minions": None,
        "Mounts": None,
        "PvPTeam": None,
    }


@pytest.fixture
def free_company_payload():
    return copy.deepcopy(_FREE_COMPANY)


@pytest.fixture
def free_company_search_payload():
    return copy.deepcopy(_FREE_COMPANY_SEARCH)


@pytest.fixture
def free_company_result_payload(free_company_payload, character_search_payload):
    return {
        "FreeCompany": free_company_payload,
        "FreeCompanyMembers": character_search_payload["Results"],
    }
