"""Navigation output models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from coursenav.schemas.node import Level


class Direction(str, Enum):
    """Which neighbour of the current page to link to."""

    FORWARD = "forward"
    BACKWARD = "backward"


class NavigationTarget(BaseModel):
    """A next/previous link computed by the resolver.

    Attributes:
        path: Route to the target, one slug per level from the exam down.
        label: Display text; names of every newly entered level joined
            with " > " when the link skips levels.
        type: Level of the node the link lands on.
        node_id: Id of the node the link lands on.
        chain: Ids from the exam down to the target, ready to pass back
            to the resolver.
    """

    path: str
    label: str
    type: Level
    node_id: str
    chain: list[str] = Field(default_factory=list)
