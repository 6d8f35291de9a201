"""Build navigation targets from the nodes the resolver selected."""

from __future__ import annotations

from typing import Sequence

from coursenav.schemas.navigation import NavigationTarget
from coursenav.schemas.node import Node

DEFAULT_PATH_SEPARATOR = "/"
DEFAULT_LABEL_SEPARATOR = " > "


def build_target(
    prefix: Sequence[Node],
    entered: Sequence[Node],
    *,
    path_separator: str = DEFAULT_PATH_SEPARATOR,
    label_separator: str = DEFAULT_LABEL_SEPARATOR,
) -> NavigationTarget:
    """Assemble the link for a resolved next/previous node.

    Args:
        prefix: Ancestors shared with the current page, root first.
        entered: Nodes newly entered by the move, from the first one down to
            the node the link lands on.
        path_separator: Separator placed before and between path slugs.
        label_separator: Separator between names when several levels were
            entered.

    Returns:
        The navigation target for the last node of ``entered``.

    Raises:
        ValueError: If ``entered`` is empty.
    """
    if not entered:
        raise ValueError("A navigation target needs at least one entered node")

    lineage = [*prefix, *entered]
    terminal = entered[-1]
    path = path_separator + path_separator.join(node.route_slug for node in lineage)
    if len(entered) == 1:
        label = terminal.name
    else:
        label = label_separator.join(node.name for node in entered)

    return NavigationTarget(
        path=path,
        label=label,
        type=terminal.level,
        node_id=terminal.id,
        chain=[node.id for node in lineage],
    )
