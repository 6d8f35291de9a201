"""Read-only query interface the resolver consumes."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from coursenav.schemas.node import Level, Node


@runtime_checkable
class NodeCatalog(Protocol):
    """Read-only access to the active content tree.

    Every sequence returned must already exclude inactive nodes (and the
    descendants of inactive nodes) and be sorted with
    :func:`coursenav.ordering.order_siblings`.
    """

    async def get_node(self, level: Level, node_id: str) -> Node | None:
        """Return the active node with ``node_id`` on ``level``, or None."""
        ...

    async def get_children(self, level: Level, parent_id: str) -> Sequence[Node]:
        """Return the active ``level`` nodes whose parent is ``parent_id``."""
        ...

    async def get_siblings(self, level: Level, parent_id: str | None) -> Sequence[Node]:
        """Return the ordered sibling set on ``level`` under ``parent_id``.

        ``parent_id`` is None only for exams, where the sibling set is the
        list of root nodes.
        """
        ...

    async def get_roots(self) -> Sequence[Node]:
        """Return the active exams."""
        ...
