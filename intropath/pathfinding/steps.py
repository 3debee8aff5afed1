"""Expand contact id chains into display-ready path steps."""

from collections.abc import Mapping

from .graph import ContactGraph
from .types import (
    UNKNOWN_CONTACT_NAME,
    ContactDetail,
    ContactNode,
    IntroductionStatus,
    PathStep,
    RelationshipType,
    Strength,
)

_EMPTY_DETAIL = ContactDetail()


def build_path_steps(
    contact_ids: list[str],
    nodes_by_id: Mapping[str, ContactNode],
    graph: ContactGraph,
    contact_details: Mapping[str, ContactDetail] | None = None,
) -> list[PathStep]:
    """Build one step per contact id.

    Strength and connection type of a step describe the hop to the next
    contact; the final step has no outgoing hop and keeps medium /
    known_connection.
    """
    details = contact_details or {}
    steps: list[PathStep] = []

    for index, contact_id in enumerate(contact_ids):
        node = nodes_by_id.get(contact_id)
        detail = details.get(contact_id) or _EMPTY_DETAIL

        strength = Strength.MEDIUM
        connection_type = RelationshipType.KNOWN_CONNECTION
        if index < len(contact_ids) - 1:
            edge = graph.edge_between(contact_id, contact_ids[index + 1])
            if edge is not None:
                strength = edge.strength
                connection_type = edge.relationship_type

        steps.append(
            PathStep(
                contact_id=contact_id,
                contact_name=node.name if node and node.name else UNKNOWN_CONTACT_NAME,
                relationship_strength=strength,
                connection_type=connection_type,
                introduction_status=IntroductionStatus.NOT_MADE,
                title=detail.title,
                company=detail.company,
                profile_picture=detail.profile_picture,
                last_interaction=detail.last_interaction,
                notes=detail.notes,
            )
        )

    return steps
