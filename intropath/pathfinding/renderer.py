"""Deterministic markdown and JSON-ready rendering of connection paths."""

from dataclasses import asdict
from enum import Enum
import re
from typing import Any

from .types import ConnectionPath, PathStep

_WS_RE = re.compile(r"\s+")
_MAX_NAME_LEN = 120
_MAX_ID_LEN = 160


def normalize_whitespace(text: str | None) -> str:
    """Collapse whitespace to single spaces."""
    if text is None:
        return ""
    return _WS_RE.sub(" ", text).strip()


def _sanitize_field(value: str | None, *, max_len: int) -> str:
    cleaned = normalize_whitespace(value)
    if len(cleaned) <= max_len:
        return cleaned
    return cleaned[: max_len - 3].rstrip() + "..."


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def path_to_dict(path: ConnectionPath) -> dict[str, Any]:
    """Convert a path into a JSON-serializable dict."""
    return _plain(asdict(path))


def _format_step(step: PathStep, *, is_last: bool) -> str:
    name = _sanitize_field(step.contact_name, max_len=_MAX_NAME_LEN)
    contact_id = _sanitize_field(step.contact_id, max_len=_MAX_ID_LEN)
    label = f"{name} [{contact_id}]"
    if step.company:
        label += f" @ {_sanitize_field(step.company, max_len=_MAX_NAME_LEN)}"
    if is_last:
        return label
    return f"{label} ({step.relationship_strength.value})"


def format_chain(path: ConnectionPath) -> str:
    """Render the hops of a path as ``A (strong) -> B (weak) -> C``."""
    last = len(path.path_steps) - 1
    return " -> ".join(
        _format_step(step, is_last=index == last)
        for index, step in enumerate(path.path_steps)
    )


def render_paths(paths: list[ConnectionPath], *, heading: str | None = None) -> str:
    """Render ranked paths as markdown with one section per path."""
    parts: list[str] = []
    if heading:
        parts.extend([f"# {heading}", ""])

    if not paths:
        parts.append("- (none)")
        return "\n".join(parts)

    for rank, path in enumerate(paths, 1):
        target = _sanitize_field(path.target_contact_name, max_len=_MAX_NAME_LEN)
        target_id = _sanitize_field(path.target_contact_id, max_len=_MAX_ID_LEN)
        parts.append(f"## {rank}. {target} [{target_id}]")
        if not path.is_reachable:
            parts.append("- (no path)")
        else:
            hops = path.path_length - 1
            intro = "yes" if path.has_introduction_history else "no"
            parts.append(
                f"- confidence={path.confidence} | hops={hops} | "
                f"strength={path.total_strength_score} | introductions={intro}"
            )
            parts.append(f"- {format_chain(path)}")
        parts.append("")

    return "\n".join(parts).rstrip("\n")
