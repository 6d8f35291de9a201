"""In-memory node catalog."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Iterable, Mapping, Sequence

from coursenav.ordering import order_siblings
from coursenav.schemas.node import Level, Node


class InMemoryCatalog:
    """Node catalog over a fixed snapshot of nodes.

    Inactive nodes and every node below an inactive ancestor are hidden from
    all queries. Orphans (nodes whose parent is missing) are hidden too.
    """

    def __init__(self, nodes: Iterable[Node]) -> None:
        self._nodes: dict[tuple[Level, str], Node] = {}
        for node in nodes:
            self._nodes[(node.level, node.id)] = node

        self._visible: dict[tuple[Level, str], Node] = {}
        for level in Level:
            for (node_level, _), node in self._nodes.items():
                if node_level is level and self._is_visible(node):
                    self._visible[(level, node.id)] = node

        grouped: dict[tuple[Level, str | None], list[Node]] = defaultdict(list)
        for (level, _), node in self._visible.items():
            grouped[(level, node.parent_id)].append(node)
        self._children = {key: tuple(order_siblings(group)) for key, group in grouped.items()}

    @classmethod
    def from_documents(cls, documents: Mapping[str, Iterable[Mapping[str, Any]]]) -> InMemoryCatalog:
        """Build a catalog from content API documents grouped by level name."""
        nodes = [
            Node.from_document(Level(level_name), doc)
            for level_name, docs in documents.items()
            for doc in docs
        ]
        return cls(nodes)

    def _is_visible(self, node: Node) -> bool:
        if not node.is_active:
            return False
        parent_level = node.level.parent
        if parent_level is None:
            return True
        if node.parent_id is None:
            return False
        # Levels are scanned root first, so a visible parent is already recorded.
        return (parent_level, node.parent_id) in self._visible

    async def get_node(self, level: Level, node_id: str) -> Node | None:
        return self._visible.get((level, node_id))

    async def get_children(self, level: Level, parent_id: str) -> Sequence[Node]:
        return self._children.get((level, parent_id), ())

    async def get_siblings(self, level: Level, parent_id: str | None) -> Sequence[Node]:
        if level is Level.EXAM:
            return await self.get_roots()
        return self._children.get((level, parent_id), ())

    async def get_roots(self) -> Sequence[Node]:
        return self._children.get((Level.EXAM, None), ())

    def __len__(self) -> int:
        return len(self._visible)

    def iter_visible(self) -> Iterable[Node]:
        """Yield every visible node, root level first."""
        return iter(self._visible.values())
