"""Tests for location registry construction and validation."""
import pytest

from locations import (
    LOCATION_HIERARCHY,
    LocationKind,
    LocationNode,
    LocationRegistry,
    RegistryError,
    build_default_registry,
    normalize_location,
)


def test_default_registry_has_no_alias_collisions():
    """The bundled table keeps every alias unique."""
    registry = build_default_registry()
    assert registry.collisions == ()
    assert len(registry) == len(LOCATION_HIERARCHY)


def test_default_registry_every_city_has_a_parent():
    registry = build_default_registry()
    for city in registry.nodes_of_kind(LocationKind.CITY):
        assert registry.parent_of(city.key) is not None, city.key


def test_node_key_is_always_an_alias():
    node = LocationNode.create("Kochi", "city", aliases=["Cochin"])
    assert node.key == "kochi"
    assert node.aliases == ("kochi", "cochin")
    assert node.is_leaf


def test_node_normalizes_and_deduplicates():
    node = LocationNode.create(
        " Tamil  Nadu ",
        "state",
        aliases=["TAMIL NADU", "tamilnadu", "", "TamilNadu"],
        children=["Chennai", "chennai"],
        codes=["TN", "tamilnadu"],
    )
    assert node.key == "tamil nadu"
    assert node.aliases == ("tamil nadu", "tamilnadu")
    assert node.children == ("chennai",)
    assert node.codes == ("tn",)


@pytest.mark.parametrize("value,expected", [
    ("  Chennai ", "chennai"),
    ("New\tDelhi", "new delhi"),
    ("", ""),
    (None, ""),
])
def test_normalize_location(value, expected):
    assert normalize_location(value) == expected


def test_unknown_kind_rejected():
    with pytest.raises(RegistryError, match="unknown kind"):
        LocationRegistry.from_config({"atlantis": {"kind": "continent"}})


def test_missing_kind_rejected():
    with pytest.raises(RegistryError, match="missing 'kind'"):
        LocationRegistry.from_config({"atlantis": {"aliases": ["atlantis"]}})


def test_duplicate_key_rejected():
    nodes = [
        LocationNode.create("goa", "state"),
        LocationNode.create("GOA", "city"),
    ]
    with pytest.raises(RegistryError, match="Duplicate"):
        LocationRegistry(nodes)


def test_unknown_child_rejected():
    with pytest.raises(RegistryError, match="unknown child"):
        LocationRegistry.from_config({
            "kerala": {"kind": "state", "children": ["kochi"]},
        })


def test_city_cannot_have_children():
    with pytest.raises(RegistryError, match="cannot contain"):
        LocationRegistry.from_config({
            "kochi": {"kind": "city", "children": ["fort kochi"]},
            "fort kochi": {"kind": "city"},
        })


def test_state_cannot_contain_state():
    with pytest.raises(RegistryError, match="cannot contain"):
        LocationRegistry.from_config({
            "north": {"kind": "state", "children": ["south"]},
            "south": {"kind": "state"},
        })


def test_self_reference_rejected():
    with pytest.raises(RegistryError):
        LocationRegistry.from_config({
            "loop": {"kind": "country", "children": ["loop"]},
        })


def test_two_parents_rejected():
    with pytest.raises(RegistryError, match="two parents"):
        LocationRegistry.from_config({
            "maharashtra": {"kind": "state", "children": ["thane"]},
            "konkan": {"kind": "region", "children": ["thane"]},
            "thane": {"kind": "city"},
        })


def test_descendants_depth_first_in_child_order():
    registry = LocationRegistry.from_config({
        "land": {"kind": "country", "children": ["east", "west"]},
        "east": {"kind": "state", "children": ["e1", "e2"]},
        "west": {"kind": "region", "children": ["w1"]},
        "e1": {"kind": "city"},
        "e2": {"kind": "city"},
        "w1": {"kind": "city"},
    })
    assert [n.key for n in registry.descendants("land")] == ["east", "e1", "e2", "west", "w1"]
    assert list(registry.descendants("e1")) == []
    assert list(registry.descendants("nowhere")) == []


def test_owner_of_codes_and_keys():
    registry = build_default_registry()
    assert registry.owner_of("ka").key == "karnataka"
    assert registry.owner_of("madras").key == "chennai"
    assert registry.owner_of("chennai").key == "chennai"
    assert registry.owner_of("atlantis") is None
    assert "chennai" in registry
    assert "madras" not in registry
