"""
Quick start: build the sample distribution diagram, edit it, and print
the default, focus and trace views with fixed-layout coordinates.
"""

from power_diagram import (
    ComponentTypeRegistry, DiagramSession, Group, Link, Node, Snapshot,
    build_diagram, edits,
)
from power_diagram.utils import print_view_summary, setup_logging

setup_logging("DEBUG")

# Sample single-line diagram
initial_diagram = build_diagram(
    nodes=[
        Node("G1",   "GENERATOR",   "Generator 1"),
        Node("B1",   "BREAKER",     "Main Breaker", {"size": "2000A"}),
        Node("T1",   "TRANSFORMER", "Transformer 1"),
        Node("BusA", "BUS",         "Main Bus"),
        Node("L1",   "LOAD",        "Load 1", {"size": "500kW"}),
        Node("L2",   "LOAD",        "Load 2", {"size": "750kW"}),
    ],
    links=[
        Link("G1",   "B1",   {"diameter": "500 sq. mm."}),
        Link("B1",   "T1",   {"diameter": "500 sq. mm."}),
        Link("T1",   "BusA", {"diameter": "240 sq. mm."}),
        Link("BusA", "L1",   {"diameter": "70 sq. mm."}),
        Link("BusA", "L2",   {"diameter": "95 sq. mm."}),
    ],
    groups=[
        Group("group1", "Generation Area", ("G1", "B1")),
        Group("group2", "Distribution",    ("BusA", "L1", "L2")),
    ],
)

session = DiagramSession(Snapshot(initial_diagram, ComponentTypeRegistry.default()))

# Edits go through history and can be undone
session.apply(edits.add_node_and_link("BusA", "LOAD", "Load 3", {"size": "120kW"}, {"diameter": "35 sq. mm."}))
session.apply(edits.update_group("group2", ("BusA", "L1", "L2", "LO1")))
print_view_summary(session.render_model(), title="Default view")

session.focus_group("group2")
print_view_summary(session.render_model(), title="Focus: Distribution")
for group_id, bounds in session.group_bounds().items():
    print(f"{group_id}: ({bounds.min_x:.0f}, {bounds.min_y:.0f}) - ({bounds.max_x:.0f}, {bounds.max_y:.0f})")

session.trace_upstream("L2")
print_view_summary(session.render_model(), title="Trace: Load 2")

session.clear_trace()
session.undo()
session.undo()
print(f"After two undos: {len(session.diagram.nodes)} nodes, can redo: {session.history.can_redo}")
