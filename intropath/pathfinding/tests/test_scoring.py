"""Tests for path step building and confidence scoring."""

import pytest

from intropath.pathfinding.config import PathfindingConfig
from intropath.pathfinding.graph import build_contact_graph
from intropath.pathfinding.scoring import (
    has_introduction_history,
    round_half_up,
    score_confidence,
    total_strength_score,
)
from intropath.pathfinding.steps import build_path_steps
from intropath.pathfinding.types import (
    ConnectionEdge,
    ContactDetail,
    ContactNode,
    IntroductionStatus,
    RelationshipType,
    Strength,
)


def _edge(
    a: str,
    b: str,
    strength: Strength,
    *,
    relationship_type: RelationshipType = RelationshipType.KNOWN_CONNECTION,
    successful: bool | None = None,
) -> ConnectionEdge:
    return ConnectionEdge(
        id=f"{a}-{b}",
        contact_a_id=a,
        contact_b_id=b,
        relationship_type=relationship_type,
        strength=strength,
        introduction_successful=successful,
    )


def _nodes(*contact_ids: str) -> dict[str, ContactNode]:
    return {cid: ContactNode(id=cid, name=f"Contact {cid.upper()}") for cid in contact_ids}


def _steps(chain: list[str], edges: list[ConnectionEdge], details=None):
    nodes = _nodes(*chain)
    graph = build_contact_graph(nodes.values(), edges)
    return build_path_steps(chain, nodes, graph, details), graph


def test_steps_take_strength_from_outgoing_edge():
    edges = [
        _edge("a", "b", Strength.STRONG),
        _edge("c", "b", Strength.WEAK, relationship_type=RelationshipType.TARGET_CONNECTION),
    ]
    steps, _ = _steps(["a", "b", "c"], edges)

    assert [s.relationship_strength for s in steps] == [
        Strength.STRONG,
        Strength.WEAK,
        Strength.MEDIUM,
    ]
    assert steps[1].connection_type == RelationshipType.TARGET_CONNECTION
    assert steps[2].connection_type == RelationshipType.KNOWN_CONNECTION
    assert all(s.introduction_status == IntroductionStatus.NOT_MADE for s in steps)


def test_steps_use_contact_details_and_unknown_names():
    graph = build_contact_graph([], [_edge("a", "ghost", Strength.MEDIUM)])
    details = {"a": ContactDetail(title="CTO", company="Acme", notes="met at conf")}

    steps = build_path_steps(["a", "ghost"], _nodes("a"), graph, details)

    assert steps[0].contact_name == "Contact A"
    assert steps[0].title == "CTO"
    assert steps[0].company == "Acme"
    assert steps[0].notes == "met at conf"
    assert steps[1].contact_name == "Unknown Contact"
    assert steps[1].title is None


def test_empty_path_scores_zero():
    graph = build_contact_graph([], [])
    assert score_confidence([], graph) == 0


def test_zero_hop_path_scores_95():
    steps, graph = _steps(["a"], [])
    assert score_confidence(steps, graph) == 95


def test_chain_confidence():
    edges = [
        _edge("a", "b", Strength.STRONG),
        _edge("b", "c", Strength.MEDIUM),
        _edge("c", "d", Strength.WEAK),
    ]
    steps, graph = _steps(["a", "b", "c", "d"], edges)

    # 15 + 37/60*70 - 30
    assert score_confidence(steps, graph) == 28


def test_strong_successful_introduction_scores_95():
    edges = [
        _edge(
            "a",
            "b",
            Strength.STRONG,
            relationship_type=RelationshipType.INTRODUCED_BY_ME,
            successful=True,
        )
    ]
    steps, graph = _steps(["a", "b"], edges)

    assert score_confidence(steps, graph) == 95


def test_unsuccessful_introduction_earns_no_bonus():
    edges = [
        _edge(
            "a",
            "b",
            Strength.STRONG,
            relationship_type=RelationshipType.INTRODUCED_BY_ME,
            successful=False,
        )
    ]
    steps, graph = _steps(["a", "b"], edges)

    assert score_confidence(steps, graph) == 85


def test_introduction_bonus_is_capped():
    intro = {"relationship_type": RelationshipType.INTRODUCED_BY_ME, "successful": True}
    edges = [
        _edge("a", "b", Strength.STRONG, **intro),
        _edge("b", "c", Strength.STRONG, **intro),
    ]
    steps, graph = _steps(["a", "b", "c"], edges)

    # 15 + 70 + min(20, 15) - 15
    assert score_confidence(steps, graph) == 85


def test_half_scores_round_up():
    steps, graph = _steps(["a", "b"], [_edge("a", "b", Strength.WEAK)])

    # 15 + 5/20*70 = 32.5
    assert score_confidence(steps, graph) == 33
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_long_weak_path_clamps_to_zero():
    chain = ["a", "b", "c", "d", "e", "f"]
    edges = [_edge(x, y, Strength.WEAK) for x, y in zip(chain, chain[1:])]
    steps, graph = _steps(chain, edges)

    # 15 + 17.5 - 60 is negative
    assert score_confidence(steps, graph) == 0


def test_first_duplicate_edge_is_scored():
    edges = [_edge("a", "b", Strength.WEAK), _edge("b", "a", Strength.STRONG)]
    steps, graph = _steps(["a", "b"], edges)

    assert steps[0].relationship_strength == Strength.WEAK
    assert score_confidence(steps, graph) == 33


def test_scoring_constants_come_from_config():
    steps, graph = _steps(["a"], [])
    assert score_confidence(steps, graph, PathfindingConfig(zero_hop_confidence=80)) == 80


def test_total_strength_score_counts_final_step_as_medium():
    edges = [
        _edge("a", "b", Strength.STRONG),
        _edge("b", "c", Strength.MEDIUM),
        _edge("c", "d", Strength.WEAK),
    ]
    steps, _ = _steps(["a", "b", "c", "d"], edges)

    assert total_strength_score(steps) == 3 + 2 + 1 + 2


@pytest.mark.parametrize(
    ("edges", "expected"),
    [
        ([_edge("a", "b", Strength.WEAK)], False),
        (
            [
                _edge("a", "b", Strength.WEAK),
                _edge("a", "c", Strength.WEAK, relationship_type=RelationshipType.INTRODUCED_BY_ME),
            ],
            True,
        ),
        (
            [
                _edge("a", "b", Strength.WEAK),
                _edge("a", "x", Strength.WEAK, relationship_type=RelationshipType.INTRODUCED_BY_ME),
            ],
            False,
        ),
    ],
)
def test_introduction_history_checks_any_edge_inside_path(edges, expected):
    graph = build_contact_graph([], edges)

    assert has_introduction_history(["a", "b", "c"], graph) is expected
