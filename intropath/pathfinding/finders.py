"""Shortest-path and bounded multi-path search over the contact graph."""

import logging
from collections import deque
from typing import Protocol

from .config import DEFAULT_PATHFINDING_CONFIG, PathfindingConfig
from .graph import ContactGraph

log = logging.getLogger(__name__)


class PathFinder(Protocol):
    def find(
        self,
        graph: ContactGraph,
        start_id: str,
        target_id: str,
    ) -> list[list[str]]: ...


def find_shortest_path(
    graph: ContactGraph,
    start_id: str,
    target_id: str,
    max_depth: int = 4,
) -> list[str]:
    """BFS for one shortest chain of contact ids, at most ``max_depth`` hops.

    Returns:
        The id chain from start to target, or [] when unreachable.
    """
    if start_id == target_id:
        return [start_id]

    visited = {start_id}
    queue: deque[tuple[str, list[str]]] = deque([(start_id, [start_id])])

    while queue:
        contact_id, path = queue.popleft()
        # Hops so far; a path at the limit cannot grow
        if len(path) - 1 >= max_depth:
            continue

        for neighbor_id in graph.neighbors(contact_id):
            if neighbor_id == target_id:
                return path + [neighbor_id]
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                queue.append((neighbor_id, path + [neighbor_id]))

    return []


def find_alternative_id_paths(
    graph: ContactGraph,
    start_id: str,
    target_id: str,
    max_paths: int = 3,
    max_depth: int = 4,
    *,
    config: PathfindingConfig = DEFAULT_PATHFINDING_CONFIG,
) -> list[list[str]]:
    """Enumerate up to ``max_paths`` simple paths with bounded DFS.

    Paths are collected in DFS order over sorted neighbors. Exploration stops
    once ``max_paths`` paths are found or ``config.visit_budget`` expansions
    have been spent.
    """
    if max_paths <= 0:
        return []

    bounded_depth = config.clamp_depth(max_depth)
    found: list[list[str]] = []
    on_path: set[str] = set()
    remaining = max(1, config.visit_budget)
    exhausted = False

    def _explore(contact_id: str, path: list[str]) -> None:
        nonlocal remaining, exhausted
        if len(found) >= max_paths or exhausted:
            return
        if remaining <= 0:
            exhausted = True
            return
        remaining -= 1

        if contact_id == target_id:
            found.append(path + [contact_id])
            return
        if len(path) >= bounded_depth:
            return

        on_path.add(contact_id)
        for neighbor_id in graph.neighbors(contact_id):
            if neighbor_id in on_path:
                continue
            _explore(neighbor_id, path + [contact_id])
            if len(found) >= max_paths:
                break
        on_path.discard(contact_id)

    _explore(start_id, [])

    if exhausted:
        log.warning(
            f"Path search {start_id} -> {target_id} hit visit budget "
            f"({config.visit_budget}); returning {len(found)} path(s)"
        )
    return found


class ShortestPathFinder:
    """Discovery strategy yielding at most one shortest path."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth

    def find(
        self,
        graph: ContactGraph,
        start_id: str,
        target_id: str,
    ) -> list[list[str]]:
        path = find_shortest_path(graph, start_id, target_id, self.max_depth)
        return [path] if path else []


class MultiPathFinder:
    """Discovery strategy yielding up to ``max_paths`` distinct simple paths."""

    def __init__(
        self,
        max_paths: int,
        max_depth: int,
        config: PathfindingConfig = DEFAULT_PATHFINDING_CONFIG,
    ):
        self.max_paths = max_paths
        self.max_depth = max_depth
        self.config = config

    def find(
        self,
        graph: ContactGraph,
        start_id: str,
        target_id: str,
    ) -> list[list[str]]:
        return find_alternative_id_paths(
            graph,
            start_id,
            target_id,
            self.max_paths,
            self.max_depth,
            config=self.config,
        )
