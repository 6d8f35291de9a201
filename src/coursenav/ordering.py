"""Sibling ordering rules every node catalog must honour."""

from __future__ import annotations

from typing import Iterable

from coursenav.schemas.node import Node

# Nodes without an explicit order number sort as if numbered 0, ahead of
# authored numbers (which start at 1).
DEFAULT_ORDER_NUMBER = 0


def sibling_sort_key(node: Node) -> tuple[int, str]:
    """Ascending order number, then case-insensitive name."""
    order = node.order_number if node.order_number is not None else DEFAULT_ORDER_NUMBER
    return order, node.name.casefold()


def order_siblings(nodes: Iterable[Node]) -> list[Node]:
    """Drop inactive nodes and sort the rest into sibling order."""
    return sorted((node for node in nodes if node.is_active), key=sibling_sort_key)
