import pytest

from power_diagram import (
    ComponentType, DuplicateComponentTypeError, Group, HistoryManager, Link,
)
from power_diagram.history import edits


def test_remove_node_drops_links_and_empty_groups(sample_snapshot):
    result = edits.remove_node("G1")(sample_snapshot)
    diagram = result.diagram
    assert "G1" not in diagram.node_ids
    assert all("G1" not in l.key for l in diagram.links)
    assert diagram.get_group("group1").node_ids == ("B1",)

    result = edits.remove_node("B1")(result)
    assert result.diagram.get_group("group1") is None
    assert result.diagram.get_group("group2") is sample_snapshot.diagram.get_group("group2")


def test_remove_missing_node_returns_input(sample_snapshot):
    assert edits.remove_node("nope")(sample_snapshot) is sample_snapshot


def test_add_and_remove_link(sample_snapshot):
    added = edits.add_link(Link("G1", "L1"))(sample_snapshot)
    assert added.diagram.links[-1].key == ("G1", "L1")

    removed = edits.remove_link("G1", "L1")(added)
    assert removed.diagram.links == sample_snapshot.diagram.links
    assert edits.remove_link("G1", "L1")(sample_snapshot) is sample_snapshot


def test_drop_node_generates_id_and_label(sample_snapshot):
    first = edits.drop_node("LOAD", 10, 20)(sample_snapshot)
    node = first.diagram.nodes[-1]
    assert node.id == "LO1"
    assert node.label == "Load 1"
    assert node.position == (10, 20)
    assert node.pinned == (10, 20)

    second = edits.drop_node("LOAD", 0, 0)(first)
    assert second.diagram.nodes[-1].id == "LO2"
    assert second.diagram.nodes[-1].label == "Load 2"


def test_drop_node_of_unregistered_type_uses_type_as_label(sample_snapshot):
    node = edits.drop_node("capacitor", 0, 0)(sample_snapshot).diagram.nodes[-1]
    assert node.id == "CA1"
    assert node.label == "capacitor 1"


def test_add_node_and_link_offsets_from_source(sample_snapshot):
    placed = edits.drop_node("BUS", 100, 40)(sample_snapshot)
    result = edits.add_node_and_link("BU1", "LOAD", "Feeder", {"size": "5kW"}, {"diameter": "16"})(placed)

    node = result.diagram.nodes[-1]
    link = result.diagram.links[-1]
    assert node.id == "LO1"
    assert node.label == "Feeder"
    assert node.properties == {"size": "5kW"}
    assert node.position == (250, 40)
    assert link.key == ("BU1", "LO1")
    assert link.properties == {"diameter": "16"}


def test_add_node_and_link_without_source_position(sample_snapshot):
    result = edits.add_node_and_link("G1", "BREAKER", "Aux")(sample_snapshot)
    assert result.diagram.nodes[-1].id == "BR1"
    assert result.diagram.nodes[-1].position == (0.0, 0.0)


def test_component_type_edits(sample_snapshot):
    custom = ComponentType("CAPACITOR", "Capacitor Bank")
    added = edits.add_component_type(custom)(sample_snapshot)
    assert added.component_types.get("CAPACITOR") == custom
    assert added.diagram is sample_snapshot.diagram

    with pytest.raises(DuplicateComponentTypeError):
        edits.add_component_type(ComponentType("capacitor", "Other"))(added)

    renamed = edits.edit_component_type(ComponentType("CAPACITOR", "Cap"))(added)
    assert renamed.component_types.label_for("CAPACITOR") == "Cap"
    assert edits.edit_component_type(ComponentType("NOPE", "x"))(added) is added


def test_duplicate_component_type_is_not_recorded(sample_snapshot):
    manager = HistoryManager(sample_snapshot)
    with pytest.raises(DuplicateComponentTypeError):
        manager.apply(edits.add_component_type(ComponentType("Generator", "Gen")))
    assert not manager.can_undo


def test_group_edits(sample_snapshot):
    added = edits.add_group(Group("g3", "Loads", ("L1", "L2")))(sample_snapshot)
    assert added.diagram.get_group("g3").node_ids == ("L1", "L2")

    updated = edits.update_group("g3", ["L1"])(added)
    assert updated.diagram.get_group("g3").node_ids == ("L1",)
    assert edits.update_group("g3", ("L1",))(updated) is updated
    assert edits.update_group("missing", ("L1",))(updated) is updated

    removed = edits.remove_group("g3")(updated)
    assert removed.diagram.get_group("g3") is None
    assert edits.remove_group("g3")(removed) is removed


def test_edits_share_untouched_structure(sample_snapshot):
    result = edits.add_link(Link("G1", "L2"))(sample_snapshot)
    assert result.diagram.nodes is sample_snapshot.diagram.nodes
    assert result.diagram.groups is sample_snapshot.diagram.groups
    assert result.component_types is sample_snapshot.component_types
