"""Unit tests for ShareProvider."""

from heirloom.adapters.memory import InMemoryWorld
from heirloom.application.services import HeirResolver, ShareProvider, ShareStore
from heirloom.core.settings import SHARES_FLAG_NAME
from heirloom.domain.models import SetSharesOptions


def test_equal_split(provider):
    result = provider.get_shares("lord")
    assert result.source == "equal-split"
    assert result.heirs == ["old", "young"]
    assert result.shares == {"old": 0.5, "young": 0.5}
    assert result.share_per_heir == 0.5


def test_equal_split_three_heirs():
    world = InMemoryWorld(
        characters=[{"id": "p"}] + [{"id": f"k{i}", "fatherId": "p", "age": i} for i in range(3)]
    )
    resolver = HeirResolver(world)
    result = ShareProvider(ShareStore(resolver, world, world), resolver).get_shares("p")
    assert all(share == 1 / 3 for share in result.shares.values())
    assert abs(sum(result.shares.values()) - 1.0) < 1e-9


def test_stored_shares_verbatim(provider, store):
    store.set_shares("lord", {"young": 3, "old": 1})
    result = provider.get_shares("lord")
    assert result.source == "stored:inheritanceShares_v1"
    assert result.shares == {"young": 0.75, "old": 0.25}
    assert result.heirs == ["young", "old"]
    assert result.share_per_heir == 0


def test_stored_shares_may_name_non_heirs(provider, store):
    store.set_shares("lord", {"A": 3, "B": 1}, SetSharesOptions(restrict_to_eligible=False))
    result = provider.get_shares("lord")
    assert result.heirs == ["A", "B"]


def test_empty_stored_map_falls_back(provider, world):
    world.write_character_flag("lord", SHARES_FLAG_NAME, {"v": 1, "setAt": 1, "shares": {}})
    assert provider.get_shares("lord").source == "equal-split"


def test_other_version_falls_back(provider, world):
    world.write_character_flag("lord", SHARES_FLAG_NAME, {"v": 2, "shares": {"stranger": 1.0}})
    assert provider.get_shares("lord").shares == {"old": 0.5, "young": 0.5}


def test_no_heirs(provider):
    result = provider.get_shares("stranger")
    assert result.source == "no-heirs"
    assert result.shares == {}
    assert result.heirs == []
    assert result.share_per_heir == 0


def test_unknown_deceased(provider):
    assert provider.get_shares("nobody").source == "no-heirs"
