"""Confidence scoring for introduction paths."""

import math
from collections.abc import Sequence

from .config import DEFAULT_PATHFINDING_CONFIG, PathfindingConfig
from .graph import ContactGraph
from .types import PathStep, RelationshipType, Strength

# Points a single hop contributes towards the strength score
HOP_STRENGTH_POINTS = {
    Strength.STRONG: 20,
    Strength.MEDIUM: 12,
    Strength.WEAK: 5,
}

# Per-step points for the coarse total strength score
STEP_STRENGTH_POINTS = {
    Strength.STRONG: 3,
    Strength.MEDIUM: 2,
    Strength.WEAK: 1,
}


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def score_confidence(
    path_steps: Sequence[PathStep],
    graph: ContactGraph,
    config: PathfindingConfig = DEFAULT_PATHFINDING_CONFIG,
) -> int:
    """Score in [0, 100] how likely a path is to work as an introduction chain.

    Combines a base score, hop strengths normalized to ``strength_weight``,
    a capped bonus for successful past introductions, and a penalty for each
    hop beyond the first.
    """
    if not path_steps:
        return 0
    if len(path_steps) == 1:
        # Zero hops: the source already is the target
        return config.zero_hop_confidence

    strength_score = 0
    introduction_bonus = 0
    for current, following in zip(path_steps, path_steps[1:]):
        edge = graph.edge_between(current.contact_id, following.contact_id)
        if edge is None:
            continue
        strength_score += HOP_STRENGTH_POINTS.get(edge.strength, 0)
        if edge.is_successful_introduction:
            introduction_bonus += config.intro_bonus_per_hop

    hops = len(path_steps) - 1
    max_possible_strength = hops * config.max_hop_points
    normalized_strength = (
        strength_score / max_possible_strength * config.strength_weight
    )
    normalized_intro_bonus = min(introduction_bonus, config.intro_bonus_cap)
    path_penalty = max(0, (len(path_steps) - 2) * config.length_penalty_per_hop)

    confidence = (
        config.base_score + normalized_strength + normalized_intro_bonus - path_penalty
    )
    confidence = max(0.0, min(100.0, confidence))
    return round_half_up(confidence)


def total_strength_score(path_steps: Sequence[PathStep]) -> int:
    """Sum of per-step strength points (strong=3, medium=2, weak=1)."""
    return sum(
        STEP_STRENGTH_POINTS.get(step.relationship_strength, 0) for step in path_steps
    )


def has_introduction_history(contact_ids: Sequence[str], graph: ContactGraph) -> bool:
    """True when any introduced-by-me edge joins two contacts on the path."""
    return any(
        edge.relationship_type == RelationshipType.INTRODUCED_BY_ME
        for edge in graph.edges_within(contact_ids)
    )
