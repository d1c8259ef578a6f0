"""Tests for extra-data selector validation and query parameter building."""

import pytest

from xivapi.client.params import lookup_params, name_token, search_params
from xivapi.client.selectors import ExtraData, selector_tokens
from xivapi.utils.exceptions import InvalidSelector


@pytest.mark.parametrize(
    "value",
    [ExtraData.FRIENDS, "friends", "FRIENDS", "Friends", "FR", "fr"],
)
def test_parse_accepts_member_value_name_and_token(value):
    assert ExtraData.parse(value) is ExtraData.FRIENDS


def test_parse_free_company_members_by_value():
    assert ExtraData.parse("free-company-members") is ExtraData.FREE_COMPANY_MEMBERS
    assert ExtraData.parse("free_company_members") is ExtraData.FREE_COMPANY_MEMBERS


@pytest.mark.parametrize("value", ["freinds", "", "MIMOS", 3, None])
def test_parse_rejects_unknown(value):
    with pytest.raises(InvalidSelector) as exc_info:
        ExtraData.parse(value)

    assert exc_info.value.selector == value


def test_invalid_selector_is_a_value_error():
    with pytest.raises(ValueError):
        selector_tokens(["achievements", "nope"])


def test_tokens_keep_order_and_drop_duplicates():
    tokens = selector_tokens(
        [ExtraData.MINIONS, ExtraData.ACHIEVEMENTS, ExtraData.MOUNTS, "FR", "achievements"]
    )

    assert tokens == ["MIMO", "AC", "FR"]


def test_single_selector_is_accepted():
    assert selector_tokens(ExtraData.PVP_TEAM) == ["PVP"]
    assert selector_tokens("free-company") == ["FC"]


def test_no_selectors():
    assert selector_tokens(None) == []
    assert selector_tokens([]) == []


def test_name_token_collapses_whitespace():
    assert name_token("Tami Pesagniyah") == "Tami+Pesagniyah"
    assert name_token("  Tami \t  Pesagniyah\n") == "Tami+Pesagniyah"
    assert name_token("K'nara Tia") == "K%27nara+Tia"


def test_empty_name_is_rejected():
    with pytest.raises(ValueError):
        name_token("   ")


def test_search_params_order_and_omission():
    assert search_params("Tami Pesagniyah") == [("name", "Tami+Pesagniyah")]
    assert search_params("SEES", page=3) == [("name", "SEES"), ("page", "3")]
    assert search_params("SEES", server="Omega", page=2) == [
        ("name", "SEES"),
        ("server", "Omega"),
        ("page", "2"),
    ]


@pytest.mark.parametrize("page", [0, -1, 0x10000, True])
def test_search_params_rejects_bad_page(page):
    with pytest.raises(ValueError):
        search_params("SEES", page=page)


def test_lookup_params():
    assert lookup_params() == []
    assert lookup_params(extended=True) == [("extended", "1")]
    assert lookup_params(data=[]) == []
    assert lookup_params(True, [ExtraData.FRIENDS, ExtraData.MOUNTS]) == [
        ("extended", "1"),
        ("data", "FR,MIMO"),
    ]
