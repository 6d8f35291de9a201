"""Resolve content page route segments to a node chain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from coursenav.catalog.base import NodeCatalog
from coursenav.exceptions import AnchorNotFoundError
from coursenav.schemas.node import Level, Node
from coursenav.slugs import find_by_slug_or_id


@dataclass(frozen=True)
class RoutePosition:
    """The node a content route points at, with its ancestors.

    Attributes:
        level: Level of the page (the deepest segment).
        nodes: Nodes from the exam down to the page.
    """

    level: Level
    nodes: tuple[Node, ...]

    @property
    def node(self) -> Node:
        return self.nodes[-1]

    @property
    def chain(self) -> list[str]:
        """Ids from the exam down, as expected by the resolver."""
        return [node.id for node in self.nodes]


async def resolve_route(catalog: NodeCatalog, segments: Sequence[str]) -> RoutePosition:
    """Match ``/exam/subject/.../subtopic`` segments against the catalog.

    Each segment may be a node id, a slug or a display name, and is matched
    among the active children of the previously matched node.

    Args:
        catalog: Source of active, ordered nodes.
        segments: One to six route segments, exam first.

    Returns:
        The matched position.

    Raises:
        ValueError: If there are no segments or more than six.
        AnchorNotFoundError: If a segment matches no active node.
    """
    if not segments or len(segments) > len(Level):
        raise ValueError(f"Expected 1 to {len(Level)} route segments, got {len(segments)}")

    nodes: list[Node] = []
    for depth, segment in enumerate(segments):
        level = Level.from_depth(depth)
        if nodes:
            candidates = await catalog.get_children(level, nodes[-1].id)
        else:
            candidates = await catalog.get_roots()
        match = find_by_slug_or_id(candidates, segment)
        if match is None:
            raise AnchorNotFoundError(level.value, segment)
        nodes.append(match)

    return RoutePosition(level=Level.from_depth(len(nodes) - 1), nodes=tuple(nodes))
