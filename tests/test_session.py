from power_diagram import (
    DiagramSession, EditMode, LayoutMode, Link, ViewKind, save_snapshot,
)
from power_diagram.history import edits


def test_focus_and_trace_clear_each_other(sample_snapshot):
    session = DiagramSession(sample_snapshot)

    session.focus_group("group2")
    assert session.selector.kind is ViewKind.FOCUS

    session.trace_upstream("L1")
    assert session.focused_group_id is None
    assert session.selector.kind is ViewKind.TRACE

    session.focus_group("group1")
    assert session.traced_node_id is None
    session.clear_focus()
    assert session.selector.kind is ViewKind.DEFAULT


def test_displayed_view_is_memoized_per_diagram(sample_snapshot):
    session = DiagramSession(sample_snapshot)
    session.focus_group("group2")

    first = session.displayed_view()
    assert session.displayed_view() is first

    session.apply(edits.add_link(Link("L1", "L2")))
    second = session.displayed_view()
    assert second is not first
    assert ("L1", "L2") in [l.key for l in second.links]

    session.undo()
    assert session.displayed_view() == first


def test_render_model_pins_coordinates_in_fixed_mode(sample_snapshot):
    session = DiagramSession(sample_snapshot)
    model = session.render_model()
    assert all(n.pinned is not None for n in model.nodes)
    assert model.get_node("G1").pinned == (0.0, 0.0)
    assert model.get_node("L1").pinned[1] == 4 * 160.0


def test_render_model_leaves_positions_in_free_mode(sample_snapshot):
    session = DiagramSession(sample_snapshot, layout_mode=LayoutMode.FREE)
    model = session.render_model()
    assert model is sample_snapshot.diagram
    assert all(n.pinned is None for n in model.nodes)


def test_trace_render_model_only_contains_upstream(sample_snapshot):
    session = DiagramSession(sample_snapshot)
    session.trace_upstream("T1")
    model = session.render_model()
    assert [n.id for n in model.nodes] == ["T1", "B1", "G1"]
    assert model.groups == ()
    assert session.group_bounds(model) == {}


def test_group_bounds_from_fixed_layout(sample_snapshot):
    session = DiagramSession(sample_snapshot)
    bounds = session.group_bounds()
    assert set(bounds) == {"group1", "group2"}
    assert bounds["group1"].member_count == 2


def test_editing_disabled_rules(sample_snapshot):
    session = DiagramSession(sample_snapshot)
    assert session.edit_mode is EditMode.VIEW
    assert session.is_editing_disabled

    session.enter_edit_mode()
    assert not session.is_editing_disabled

    session.trace_upstream("L1")
    assert session.is_editing_disabled
    session.clear_trace()
    assert not session.is_editing_disabled

    session.exit_edit_mode()
    assert session.is_editing_disabled


def test_load_resets_history_and_selection(tmp_path, sample_snapshot):
    path = save_snapshot(sample_snapshot, tmp_path / "saved.json")

    session = DiagramSession()
    session.apply(edits.drop_node("BUS", 0, 0))
    session.focus_group("group1")

    session.load(path)
    assert session.snapshot == sample_snapshot
    assert not session.history.can_undo
    assert session.selector.kind is ViewKind.DEFAULT


def test_save_writes_present(tmp_path, sample_snapshot):
    session = DiagramSession(sample_snapshot)
    session.apply(edits.remove_node("L2"))
    path = session.save(tmp_path / "out.json")

    restored = DiagramSession()
    restored.load(path)
    assert "L2" not in restored.diagram.node_ids
