"""Content node models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from coursenav.slugs import create_slug


class Level(str, Enum):
    """The six tiers of the content tree, root first."""

    EXAM = "exam"
    SUBJECT = "subject"
    UNIT = "unit"
    CHAPTER = "chapter"
    TOPIC = "topic"
    SUBTOPIC = "subtopic"

    @property
    def depth(self) -> int:
        return _LEVEL_ORDER.index(self)

    @property
    def parent(self) -> Level | None:
        depth = self.depth
        return _LEVEL_ORDER[depth - 1] if depth > 0 else None

    @property
    def child(self) -> Level | None:
        depth = self.depth
        return _LEVEL_ORDER[depth + 1] if depth + 1 < len(_LEVEL_ORDER) else None

    @property
    def is_fine(self) -> bool:
        """Topic and subtopic pages, where navigation descends fully."""
        return self in (Level.TOPIC, Level.SUBTOPIC)

    @property
    def parent_key(self) -> str | None:
        """Document field holding the parent id (``examId`` for subjects, ...)."""
        parent = self.parent
        return f"{parent.value}Id" if parent else None

    @classmethod
    def from_depth(cls, depth: int) -> Level:
        return _LEVEL_ORDER[depth]


_LEVEL_ORDER: tuple[Level, ...] = tuple(Level)


class NodeStatus(str, Enum):
    """Visibility of a node in the public browsing UI."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class Node(BaseModel):
    """A single exam, subject, unit, chapter, topic or subtopic.

    Attributes:
        id: Opaque, stable identifier.
        name: Display name.
        level: Tier of the content tree this node lives on.
        order_number: Author-assigned position among siblings, if any.
        status: Only active nodes take part in browsing and navigation.
        parent_id: Id of the immediate parent; None only for exams.
        slug: Stored URL slug. When absent the slug is derived from ``name``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    level: Level
    order_number: int | None = None
    status: NodeStatus = NodeStatus.ACTIVE
    parent_id: str | None = None
    slug: str | None = Field(default=None)

    @property
    def is_active(self) -> bool:
        return self.status is NodeStatus.ACTIVE

    @property
    def route_slug(self) -> str:
        """Slug used when building navigation paths."""
        return self.slug or create_slug(self.name)

    @classmethod
    def from_document(cls, level: Level, doc: Mapping[str, Any]) -> Node:
        """Build a node from a content API document.

        The parent reference may be a bare id or a populated document
        (``{"_id": ..., "name": ...}``).
        """
        parent_id = None
        if level.parent_key:
            parent_id = _ref_id(doc.get(level.parent_key))
        status = doc.get("status") or NodeStatus.ACTIVE.value
        return cls(
            id=str(doc.get("_id", doc.get("id"))),
            name=str(doc.get("name") or ""),
            level=level,
            order_number=doc.get("orderNumber"),
            # "draft" and any other non-active state is hidden from navigation
            status=NodeStatus.ACTIVE if status == NodeStatus.ACTIVE.value else NodeStatus.INACTIVE,
            parent_id=parent_id,
            slug=doc.get("slug") or None,
        )


def _ref_id(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        ref = value.get("_id", value.get("id"))
        return str(ref) if ref is not None else None
    return str(value)
