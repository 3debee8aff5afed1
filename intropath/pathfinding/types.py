"""Typed contracts for contact path discovery."""

from dataclasses import dataclass
from enum import Enum

UNKNOWN_CONTACT_NAME = "Unknown Contact"


class Strength(Enum):
    """How strong a relationship between two contacts is."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


class RelationshipType(Enum):
    """How a relationship came about."""

    INTRODUCED_BY_ME = "introduced_by_me"
    KNOWN_CONNECTION = "known_connection"
    TARGET_CONNECTION = "target_connection"


class IntroductionStatus(Enum):
    """Progress of an introduction request along a path hop."""

    NOT_MADE = "not_made"
    PENDING = "pending"
    SUCCESSFUL = "successful"
    DECLINED = "declined"


@dataclass(frozen=True)
class ContactNode:
    id: str
    name: str
    relationship_strength: Strength = Strength.MEDIUM
    connection_type: RelationshipType = RelationshipType.KNOWN_CONNECTION


@dataclass(frozen=True)
class ConnectionEdge:
    """Undirected relationship between two contacts.

    The A/B orientation is how the record was stored; traversal ignores it.
    """

    id: str
    contact_a_id: str
    contact_b_id: str
    relationship_type: RelationshipType = RelationshipType.KNOWN_CONNECTION
    strength: Strength = Strength.MEDIUM
    introduction_successful: bool | None = None
    context: str | None = None

    @property
    def is_successful_introduction(self) -> bool:
        return (
            self.relationship_type == RelationshipType.INTRODUCED_BY_ME
            and self.introduction_successful is True
        )


@dataclass(frozen=True)
class ContactDetail:
    """Display data resolved by the caller for one contact."""

    title: str | None = None
    company: str | None = None
    profile_picture: str | None = None
    last_interaction: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class PathStep:
    contact_id: str
    contact_name: str
    relationship_strength: Strength = Strength.MEDIUM
    connection_type: RelationshipType = RelationshipType.KNOWN_CONNECTION
    introduction_status: IntroductionStatus = IntroductionStatus.NOT_MADE
    title: str | None = None
    company: str | None = None
    profile_picture: str | None = None
    last_interaction: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class ConnectionPath:
    """One scored route from the source contact to a target contact.

    An empty ``path_steps`` tuple means the target could not be reached.
    """

    target_contact_id: str
    target_contact_name: str
    path_steps: tuple[PathStep, ...]
    path_length: int
    confidence: int
    total_strength_score: int
    has_introduction_history: bool

    def __post_init__(self) -> None:
        if self.path_length != len(self.path_steps):
            raise ValueError(
                f"path_length {self.path_length} does not match "
                f"{len(self.path_steps)} steps"
            )
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"confidence out of range: {self.confidence}")
        if not self.path_steps and self.confidence != 0:
            raise ValueError("an empty path must have zero confidence")

    @property
    def is_reachable(self) -> bool:
        return bool(self.path_steps)

    @property
    def contact_ids(self) -> tuple[str, ...]:
        return tuple(step.contact_id for step in self.path_steps)

    @classmethod
    def unreachable(
        cls, target_contact_id: str, target_contact_name: str
    ) -> "ConnectionPath":
        """Build the empty-path entry used for unreachable or unknown targets."""
        return cls(
            target_contact_id=target_contact_id,
            target_contact_name=target_contact_name,
            path_steps=tuple(),
            path_length=0,
            confidence=0,
            total_strength_score=0,
            has_introduction_history=False,
        )
