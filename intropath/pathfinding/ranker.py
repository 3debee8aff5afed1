"""Deterministic ordering of scored connection paths."""

from collections.abc import Iterable

from .types import ConnectionPath


def _path_sort_key(path: ConnectionPath) -> tuple[int, int]:
    return (-path.confidence, path.path_length)


def rank_paths(paths: Iterable[ConnectionPath]) -> list[ConnectionPath]:
    """Sort by confidence (highest first), then path length (shortest first).

    The sort is stable, so equal paths keep their discovery order.
    """
    return sorted(paths, key=_path_sort_key)
