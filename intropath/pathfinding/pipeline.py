"""Path discovery pipeline: graph -> finder -> steps -> scoring -> ranking."""

from collections.abc import Mapping, Sequence
import logging

from .config import DEFAULT_PATHFINDING_CONFIG, PathfindingConfig
from .finders import MultiPathFinder, PathFinder, ShortestPathFinder
from .graph import ContactGraph, build_contact_graph
from .ranker import rank_paths
from .scoring import has_introduction_history, score_confidence, total_strength_score
from .steps import build_path_steps
from .types import (
    UNKNOWN_CONTACT_NAME,
    ConnectionEdge,
    ConnectionPath,
    ContactDetail,
    ContactNode,
)

log = logging.getLogger(__name__)


def _index_nodes(nodes: Sequence[ContactNode]) -> dict[str, ContactNode]:
    # First record wins for duplicated ids
    indexed: dict[str, ContactNode] = {}
    for node in nodes:
        indexed.setdefault(node.id, node)
    return indexed


def _to_connection_path(
    contact_ids: list[str],
    target: ContactNode,
    *,
    nodes_by_id: Mapping[str, ContactNode],
    graph: ContactGraph,
    contact_details: Mapping[str, ContactDetail] | None,
    config: PathfindingConfig,
) -> ConnectionPath:
    steps = build_path_steps(contact_ids, nodes_by_id, graph, contact_details)
    return ConnectionPath(
        target_contact_id=target.id,
        target_contact_name=target.name,
        path_steps=tuple(steps),
        path_length=len(steps),
        confidence=score_confidence(steps, graph, config),
        total_strength_score=total_strength_score(steps),
        has_introduction_history=has_introduction_history(contact_ids, graph),
    )


def discover_paths(
    finder: PathFinder,
    source_contact_id: str,
    target: ContactNode,
    *,
    nodes_by_id: Mapping[str, ContactNode],
    graph: ContactGraph,
    contact_details: Mapping[str, ContactDetail] | None = None,
    config: PathfindingConfig = DEFAULT_PATHFINDING_CONFIG,
) -> list[ConnectionPath]:
    """Run one discovery strategy and score every path it yields."""
    id_paths = finder.find(graph, source_contact_id, target.id)
    log.debug(f"{source_contact_id} -> {target.id}: {len(id_paths)} path(s) found")
    return [
        _to_connection_path(
            contact_ids,
            target,
            nodes_by_id=nodes_by_id,
            graph=graph,
            contact_details=contact_details,
            config=config,
        )
        for contact_ids in id_paths
    ]


def find_best_paths(
    source_contact_id: str,
    target_contact_ids: Sequence[str],
    nodes: Sequence[ContactNode],
    edges: Sequence[ConnectionEdge],
    contact_details: Mapping[str, ContactDetail] | None = None,
    max_path_length: int | None = None,
    *,
    config: PathfindingConfig = DEFAULT_PATHFINDING_CONFIG,
) -> list[ConnectionPath]:
    """Find the shortest path to each target and rank the results.

    Every requested target yields exactly one entry. Targets that are
    unreachable within ``max_path_length`` hops, or unknown to ``nodes``,
    get an empty path with zero confidence. ``max_path_length`` defaults to
    ``config.max_path_length``.
    """
    graph = build_contact_graph(nodes, edges)
    nodes_by_id = _index_nodes(nodes)
    if max_path_length is None:
        max_path_length = config.max_path_length
    finder = ShortestPathFinder(max_path_length)

    results: list[ConnectionPath] = []
    for target_id in target_contact_ids:
        target = nodes_by_id.get(target_id)
        if target is None:
            log.debug(f"Target {target_id} is not a known contact")
            results.append(ConnectionPath.unreachable(target_id, UNKNOWN_CONTACT_NAME))
            continue

        found = discover_paths(
            finder,
            source_contact_id,
            target,
            nodes_by_id=nodes_by_id,
            graph=graph,
            contact_details=contact_details,
            config=config,
        )
        if found:
            results.append(found[0])
        else:
            results.append(ConnectionPath.unreachable(target.id, target.name))

    return rank_paths(results)


def find_alternative_paths(
    source_contact_id: str,
    target_contact_id: str,
    nodes: Sequence[ContactNode],
    edges: Sequence[ConnectionEdge],
    contact_details: Mapping[str, ContactDetail] | None = None,
    max_paths: int | None = None,
    max_path_length: int | None = None,
    *,
    config: PathfindingConfig = DEFAULT_PATHFINDING_CONFIG,
) -> list[ConnectionPath]:
    """Find up to ``max_paths`` distinct simple paths to one target, ranked.

    Returns [] when the target is unknown or unreachable. Limits left as None
    fall back to ``config.max_paths`` and ``config.max_path_length``.
    """
    nodes_by_id = _index_nodes(nodes)
    target = nodes_by_id.get(target_contact_id)
    if target is None:
        log.debug(f"Target {target_contact_id} is not a known contact")
        return []

    graph = build_contact_graph(nodes, edges)
    if max_paths is None:
        max_paths = config.max_paths
    if max_path_length is None:
        max_path_length = config.max_path_length
    finder = MultiPathFinder(max_paths, max_path_length, config)
    return rank_paths(
        discover_paths(
            finder,
            source_contact_id,
            target,
            nodes_by_id=nodes_by_id,
            graph=graph,
            contact_details=contact_details,
            config=config,
        )
    )
