import dataclasses

import pytest

from power_diagram import (
    ComponentType, ComponentTypeRegistry, ConfigurationError, Diagram, Group,
    LayoutConfiguration, Link, Node, Snapshot,
)
from power_diagram.core.constants import BUILTIN_TYPES


def test_models_are_immutable():
    node = Node("A", "BUS", "A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.label = "B"
    with pytest.raises(dataclasses.FrozenInstanceError):
        Snapshot().diagram = Diagram()


def test_collections_are_stored_as_tuples():
    group = Group("g", "G", ["A", "B"])
    diagram = Diagram([Node("A", "BUS", "A")], [Link("A", "B")], [group])
    assert group.node_ids == ("A", "B")
    assert isinstance(diagram.nodes, tuple)
    assert isinstance(diagram.links, tuple)
    assert "A" in group


def test_diagram_lookups_tolerate_missing_ids():
    diagram = Diagram([Node("A", "BUS", "A")])
    assert diagram.get_node("A").label == "A"
    assert diagram.get_node("Z") is None
    assert diagram.get_group("g") is None
    assert not diagram.has_node("Z")


def test_default_registry_covers_builtin_types():
    registry = ComponentTypeRegistry.default()
    assert [c.type for c in registry] == list(BUILTIN_TYPES)
    assert registry.label_for("TRANSFORMER") == "Transformer"
    assert registry.label_for("CUSTOM") == "CUSTOM"
    assert registry.contains("bus")


def test_registry_replace_unknown_returns_same():
    registry = ComponentTypeRegistry.default()
    assert registry.with_replaced(ComponentType("NOPE", "x")) is registry


def test_layout_defaults():
    config = LayoutConfiguration()
    assert config.horizontal_spacing == 120.0
    assert config.vertical_spacing == 160.0
    assert config.group_padding == 60.0
    assert config.group_padding > config.node_radius


@pytest.mark.parametrize("kwargs", [
    {"horizontal_spacing": 0},
    {"vertical_spacing": -1},
    {"icon_size": 0},
    {"label_clearance": -5},
    {"virtual_root_id": ""},
    {"cousin_separation": 0},
])
def test_invalid_layout_settings_raise(kwargs):
    with pytest.raises(ConfigurationError):
        LayoutConfiguration(**kwargs)


def test_update_settings_validates():
    config = LayoutConfiguration()
    config.update_settings(horizontal_spacing=200)
    assert config.horizontal_spacing == 200
    with pytest.raises(ConfigurationError):
        config.update_settings(unknown=1)
    with pytest.raises(ConfigurationError):
        config.update_settings(group_padding=1)


def test_config_dict_round_trip():
    config = LayoutConfiguration(horizontal_spacing=90)
    restored = LayoutConfiguration.from_dict({**config.to_dict(), "extra": True})
    assert restored == config
