"""Load contact networks from YAML or JSON files."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml

from .types import (
    ConnectionEdge,
    ContactDetail,
    ContactNode,
    RelationshipType,
    Strength,
)

E = TypeVar("E", bound=Enum)

_DETAIL_FIELDS = ("title", "company", "profile_picture", "last_interaction", "notes")


class NetworkFileError(ValueError):
    """Raised when a network file cannot be turned into graph records."""


@dataclass
class Network:
    """Node, edge and detail records for one path-discovery request."""

    nodes: list[ContactNode] = field(default_factory=list)
    edges: list[ConnectionEdge] = field(default_factory=list)
    details: dict[str, ContactDetail] = field(default_factory=dict)


def _required_id(raw: dict, key: str, where: str) -> str:
    value = raw.get(key)
    if value is None or not str(value).strip():
        raise NetworkFileError(f"{where}: missing '{key}'")
    return str(value).strip()


def _optional_str(raw: dict, key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    return str(value)


def _enum_value(enum_cls: type[E], raw: Any, default: E, where: str) -> E:
    if raw is None:
        return default
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise NetworkFileError(
            f"{where}: invalid value '{raw}' (expected one of: {allowed})"
        ) from exc


def _parse_node(raw: Any, index: int) -> ContactNode:
    where = f"nodes[{index}]"
    if not isinstance(raw, dict):
        raise NetworkFileError(f"{where}: expected a mapping")
    node_id = _required_id(raw, "id", where)
    return ContactNode(
        id=node_id,
        name=_optional_str(raw, "name") or node_id,
        relationship_strength=_enum_value(
            Strength, raw.get("relationship_strength"), Strength.MEDIUM, where
        ),
        connection_type=_enum_value(
            RelationshipType,
            raw.get("connection_type"),
            RelationshipType.KNOWN_CONNECTION,
            where,
        ),
    )


def _parse_edge(raw: Any, index: int) -> ConnectionEdge:
    where = f"connections[{index}]"
    if not isinstance(raw, dict):
        raise NetworkFileError(f"{where}: expected a mapping")

    successful = raw.get("introduction_successful")
    if successful is not None and not isinstance(successful, bool):
        raise NetworkFileError(f"{where}: introduction_successful must be a boolean")

    return ConnectionEdge(
        id=str(raw.get("id") or index),
        contact_a_id=_required_id(raw, "contact_a_id", where),
        contact_b_id=_required_id(raw, "contact_b_id", where),
        relationship_type=_enum_value(
            RelationshipType,
            raw.get("relationship_type"),
            RelationshipType.KNOWN_CONNECTION,
            where,
        ),
        strength=_enum_value(Strength, raw.get("strength"), Strength.MEDIUM, where),
        introduction_successful=successful,
        context=_optional_str(raw, "context"),
    )


def _parse_details(raw: Any) -> dict[str, ContactDetail]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise NetworkFileError("details: expected a mapping of contact id to fields")

    details: dict[str, ContactDetail] = {}
    for contact_id, fields_raw in raw.items():
        if not isinstance(fields_raw, dict):
            raise NetworkFileError(f"details[{contact_id}]: expected a mapping")
        details[str(contact_id)] = ContactDetail(
            **{name: _optional_str(fields_raw, name) for name in _DETAIL_FIELDS}
        )
    return details


def parse_network(payload: Any) -> Network:
    """Turn a decoded YAML/JSON document into a Network.

    Accepts ``nodes``, ``connections`` (or ``edges``) and optional ``details``.
    """
    if not isinstance(payload, dict):
        raise NetworkFileError("network document must be a mapping")

    raw_nodes = payload.get("nodes") or []
    raw_edges = payload.get("connections")
    if raw_edges is None:
        raw_edges = payload.get("edges") or []

    if not isinstance(raw_nodes, list):
        raise NetworkFileError("nodes: expected a list")
    if not isinstance(raw_edges, list):
        raise NetworkFileError("connections: expected a list")

    return Network(
        nodes=[_parse_node(raw, i) for i, raw in enumerate(raw_nodes)],
        edges=[_parse_edge(raw, i) for i, raw in enumerate(raw_edges)],
        details=_parse_details(payload.get("details")),
    )


def load_network(path: str | Path) -> Network:
    """Load a network file. JSON is valid YAML, so both formats are accepted."""
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise NetworkFileError(f"Network file not found: {file_path}") from exc
    except UnicodeDecodeError as exc:
        raise NetworkFileError(
            f"Network file is not valid UTF-8: {file_path}"
        ) from exc
    except OSError as exc:
        raise NetworkFileError(
            f"Cannot read {file_path}: {exc.strerror or exc}"
        ) from exc
    except yaml.YAMLError as exc:
        raise NetworkFileError(f"Failed to parse {file_path}: {exc}") from exc

    return parse_network(payload or {})
