"""Configuration for contact path discovery."""

from dataclasses import dataclass, fields
import os

_ENV_OVERRIDES = {
    "max_path_length": "INTROPATH_MAX_PATH_LENGTH",
    "max_paths": "INTROPATH_MAX_PATHS",
    "depth_ceiling": "INTROPATH_DEPTH_CEILING",
    "visit_budget": "INTROPATH_VISIT_BUDGET",
}


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class PathfindingConfig:
    """Constants controlling path search and confidence scoring."""

    max_path_length: int = 4
    max_paths: int = 3
    depth_ceiling: int = 5
    visit_budget: int = 100_000

    base_score: float = 15.0
    strength_weight: float = 70.0
    max_hop_points: int = 20
    intro_bonus_per_hop: int = 10
    intro_bonus_cap: int = 15
    length_penalty_per_hop: int = 15
    zero_hop_confidence: int = 95

    def clamp_depth(self, depth: int) -> int:
        """Clamp search depth (in hops) to supported range."""
        if depth < 0:
            return 0
        if depth > self.depth_ceiling:
            return self.depth_ceiling
        return depth

    @classmethod
    def from_env(cls) -> "PathfindingConfig":
        """Build a config with INTROPATH_* environment overrides applied."""
        defaults = {f.name: f.default for f in fields(cls)}
        overrides = {
            name: _int_env(env_name, defaults[name])
            for name, env_name in _ENV_OVERRIDES.items()
        }
        return cls(**overrides)


DEFAULT_PATHFINDING_CONFIG = PathfindingConfig()
