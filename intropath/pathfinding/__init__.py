"""Relationship-graph path discovery and introduction confidence scoring."""

from typing import Any

__all__ = ["find_alternative_paths", "find_best_paths"]


def find_best_paths(*args: Any, **kwargs: Any) -> list:
    from .pipeline import find_best_paths as _find_best_paths

    return _find_best_paths(*args, **kwargs)


def find_alternative_paths(*args: Any, **kwargs: Any) -> list:
    from .pipeline import find_alternative_paths as _find_alternative_paths

    return _find_alternative_paths(*args, **kwargs)
