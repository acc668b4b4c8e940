import pytest

from power_diagram import (
    ComponentTypeRegistry, Group, Link, Node, Snapshot, build_diagram,
)


def make_nodes(*ids, node_type="BUS"):
    return [Node(i, node_type, f"Node {i}") for i in ids]


def make_links(*pairs):
    return [Link(s, t) for s, t in pairs]


@pytest.fixture
def chain():
    """A -> B -> C -> D"""
    return build_diagram(
        make_nodes("A", "B", "C", "D"),
        make_links(("A", "B"), ("B", "C"), ("C", "D")),
    )


@pytest.fixture
def diamond():
    """A -> B, A -> C, B -> D, C -> D with group {B, C}"""
    return build_diagram(
        make_nodes("A", "B", "C", "D"),
        make_links(("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")),
        [Group("mid", "Middle", ("B", "C"))],
    )


@pytest.fixture
def sample_snapshot():
    diagram = build_diagram(
        nodes=[
            Node("G1", "GENERATOR", "Generator 1"),
            Node("B1", "BREAKER", "Main Breaker", {"size": "2000A"}),
            Node("T1", "TRANSFORMER", "Transformer 1"),
            Node("BusA", "BUS", "Main Bus"),
            Node("L1", "LOAD", "Load 1", {"size": "500kW"}),
            Node("L2", "LOAD", "Load 2", {"size": "750kW"}),
        ],
        links=[
            Link("G1", "B1", {"diameter": "500 sq. mm."}),
            Link("B1", "T1", {"diameter": "500 sq. mm."}),
            Link("T1", "BusA", {"diameter": "240 sq. mm."}),
            Link("BusA", "L1", {"diameter": "70 sq. mm."}),
            Link("BusA", "L2", {"diameter": "95 sq. mm."}),
        ],
        groups=[
            Group("group1", "Generation Area", ("G1", "B1")),
            Group("group2", "Distribution", ("BusA", "L1", "L2")),
        ],
    )
    return Snapshot(diagram, ComponentTypeRegistry.default())
