"""Next/previous resolution across the six-level content tree.

Given the page a reader is on (its level and the ids of the page and every
ancestor up to the exam), the resolver finds the adjacent content page:

1. Forward only: descend into the page's own children, fully at topic and
   subtopic level and one level deep at coarser levels.
2. Move to the adjacent sibling under the same parent and descend from it.
   At topic and subtopic level the descent is full in both directions. At
   exam, subject, unit and chapter level moving forward enters only the
   sibling's first child, while moving backward descends through last
   children to the deepest node.
3. With no sibling at this level, ascend one level and retry step 2.
4. Past the last (or before the first) exam there is nothing to link to.

Every catalog query is guarded by :mod:`coursenav.steps`: a query that
fails or times out counts as "nothing here" and the walk falls through to
the next tier. The anchor and its ancestors are the exception: a missing or
broken anchor raises AnchorNotFoundError, and a failed read of one of them
raises CatalogError, since there is no position to navigate from.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Sequence

from coursenav.catalog.base import NodeCatalog
from coursenav.config import COURSENAV_QUERY_TIMEOUT_S
from coursenav.exceptions import AnchorNotFoundError, CatalogError
from coursenav.schemas.navigation import Direction, NavigationTarget
from coursenav.schemas.node import Level, Node
from coursenav.steps import run_step
from coursenav.targets import DEFAULT_LABEL_SEPARATOR, DEFAULT_PATH_SEPARATOR, build_target

logger = logging.getLogger(__name__)


@dataclass
class ResolveOptions:
    """Options for next/previous resolution.

    Attributes:
        query_timeout: Seconds allowed for each catalog query. A query that
            runs longer counts as having found nothing. None disables it.
        descend_into_anchor: When moving forward from an exam, subject, unit
            or chapter page, link to its first child before looking at
            siblings. Topic pages always descend into their subtopics.
        path_separator: Separator used in target paths.
        label_separator: Separator used in multi-level target labels.
    """

    query_timeout: float | None = COURSENAV_QUERY_TIMEOUT_S
    descend_into_anchor: bool = True
    path_separator: str = DEFAULT_PATH_SEPARATOR
    label_separator: str = DEFAULT_LABEL_SEPARATOR


async def resolve_navigation(
    catalog: NodeCatalog,
    direction: Direction | str,
    anchor_level: Level | str,
    chain: Sequence[str],
    *,
    options: ResolveOptions | None = None,
) -> NavigationTarget | None:
    """Compute the next or previous page relative to the anchor.

    Args:
        catalog: Read-only source of active, ordered nodes.
        direction: FORWARD for "next", BACKWARD for "previous".
        anchor_level: Level of the page currently displayed.
        chain: Ids from the exam down to the displayed node.
        options: Resolution options. Uses defaults if None.

    Returns:
        The navigation target, or None at the start/end of the content.

    Raises:
        ValueError: If ``chain`` does not hold one id per level down to
            ``anchor_level``.
        AnchorNotFoundError: If the anchor or one of its ancestors is
            missing, inactive, or not linked to the given parent.
        CatalogError: If reading the anchor or one of its ancestors fails
            or times out.
    """
    opts = options or ResolveOptions()
    direction = Direction(direction)
    anchor_level = Level(anchor_level)

    lineage = await _load_lineage(catalog, anchor_level, chain, opts)
    anchor = lineage[-1]

    if direction is Direction.FORWARD:
        target = await _own_subtree_step(catalog, lineage, opts)
        if target is not None:
            return target

    for depth in range(anchor_level.depth, -1, -1):
        target = await _sibling_step(catalog, direction, lineage, depth, opts)
        if target is not None:
            logger.debug(
                "Resolved %s from %s %s to %s",
                direction.value,
                anchor.level.value,
                anchor.id,
                target.path,
            )
            return target

    logger.debug(
        "No %s target from %s %s",
        direction.value,
        anchor.level.value,
        anchor.id,
        extra={"direction": direction.value, "node_id": anchor.id},
    )
    return None


async def get_next(
    catalog: NodeCatalog,
    anchor_level: Level | str,
    chain: Sequence[str],
    *,
    options: ResolveOptions | None = None,
) -> NavigationTarget | None:
    """Return the page after the anchor, or None at the end of the content."""
    return await resolve_navigation(catalog, Direction.FORWARD, anchor_level, chain, options=options)


async def get_previous(
    catalog: NodeCatalog,
    anchor_level: Level | str,
    chain: Sequence[str],
    *,
    options: ResolveOptions | None = None,
) -> NavigationTarget | None:
    """Return the page before the anchor, or None at the start of the content."""
    return await resolve_navigation(catalog, Direction.BACKWARD, anchor_level, chain, options=options)


class NavigationResolver:
    """A catalog bound to resolution options, for page code holding one catalog."""

    def __init__(self, catalog: NodeCatalog, options: ResolveOptions | None = None) -> None:
        self.catalog = catalog
        self.options = options or ResolveOptions()

    async def resolve(
        self, direction: Direction | str, anchor_level: Level | str, chain: Sequence[str]
    ) -> NavigationTarget | None:
        return await resolve_navigation(self.catalog, direction, anchor_level, chain, options=self.options)

    async def next(self, anchor_level: Level | str, chain: Sequence[str]) -> NavigationTarget | None:
        return await self.resolve(Direction.FORWARD, anchor_level, chain)

    async def previous(self, anchor_level: Level | str, chain: Sequence[str]) -> NavigationTarget | None:
        return await self.resolve(Direction.BACKWARD, anchor_level, chain)


async def _load_lineage(
    catalog: NodeCatalog,
    anchor_level: Level,
    chain: Sequence[str],
    opts: ResolveOptions,
) -> list[Node]:
    """Fetch the anchor and its ancestors, checking they form one path."""
    expected = anchor_level.depth + 1
    if len(chain) != expected:
        raise ValueError(
            f"A {anchor_level.value} chain needs {expected} ids (exam first), got {len(chain)}"
        )

    levels = [Level.from_depth(depth) for depth in range(expected)]
    results = await asyncio.gather(
        *(
            run_step(
                catalog.get_node(level, node_id),
                step="load lineage",
                timeout=opts.query_timeout,
                context={"level": level.value, "node_id": node_id},
            )
            for level, node_id in zip(levels, chain)
        )
    )

    anchor_id = chain[-1]
    lineage: list[Node] = []
    for level, node_id, result in zip(levels, chain, results):
        if result.failed:
            raise CatalogError(
                f"Could not load {level.value} {node_id!r} for {anchor_level.value} {anchor_id!r}: "
                f"{str(result.error) or 'query timed out'}"
            ) from result.error
        node = result.first()
        if node is None:
            raise AnchorNotFoundError(
                anchor_level.value,
                anchor_id,
                f"{anchor_level.value} {anchor_id!r} not found: {level.value} {node_id!r} is unavailable",
            )
        parent = lineage[-1] if lineage else None
        if parent is not None and node.parent_id != parent.id:
            raise AnchorNotFoundError(
                anchor_level.value,
                anchor_id,
                f"{anchor_level.value} {anchor_id!r} not found: {level.value} {node_id!r} "
                f"does not belong to {parent.level.value} {parent.id!r}",
            )
        lineage.append(node)
    return lineage


async def _own_subtree_step(
    catalog: NodeCatalog,
    lineage: list[Node],
    opts: ResolveOptions,
) -> NavigationTarget | None:
    anchor = lineage[-1]
    if anchor.level.is_fine:
        max_depth = None
    elif opts.descend_into_anchor:
        max_depth = 1
    else:
        return None

    entered = await _descend(catalog, anchor, Direction.FORWARD, max_depth, opts)
    if not entered:
        return None
    return build_target(
        lineage,
        entered,
        path_separator=opts.path_separator,
        label_separator=opts.label_separator,
    )


async def _sibling_step(
    catalog: NodeCatalog,
    direction: Direction,
    lineage: list[Node],
    depth: int,
    opts: ResolveOptions,
) -> NavigationTarget | None:
    """Move to the adjacent sibling of ``lineage[depth]`` and descend from it."""
    node = lineage[depth]
    parent_id = lineage[depth - 1].id if depth > 0 else None
    result = await run_step(
        catalog.get_siblings(node.level, parent_id),
        step="sibling lookup",
        timeout=opts.query_timeout,
        context={"level": node.level.value, "node_id": node.id},
    )
    if result.empty:
        return None

    position = next((index for index, sibling in enumerate(result.nodes) if sibling.id == node.id), None)
    if position is None:
        logger.warning(
            "%s %s missing from its own sibling list",
            node.level.value,
            node.id,
            extra={"level": node.level.value, "node_id": node.id},
        )
        return None

    neighbour_index = position + 1 if direction is Direction.FORWARD else position - 1
    if not 0 <= neighbour_index < len(result.nodes):
        return None
    neighbour = result.nodes[neighbour_index]

    # Moving forward across exam/subject/unit/chapter boundaries stops one
    # level below the new sibling; every other crossing descends fully.
    if direction is Direction.FORWARD and not node.level.is_fine:
        max_depth = 1
    else:
        max_depth = None

    entered = [neighbour, *await _descend(catalog, neighbour, direction, max_depth, opts)]
    return build_target(
        lineage[:depth],
        entered,
        path_separator=opts.path_separator,
        label_separator=opts.label_separator,
    )


async def _descend(
    catalog: NodeCatalog,
    start: Node,
    direction: Direction,
    max_depth: int | None,
    opts: ResolveOptions,
) -> list[Node]:
    """Follow first-child (forward) or last-child (backward) links below ``start``.

    Stops at a childless node, at the subtopic level, after ``max_depth``
    levels, or when a child query fails.
    """
    entered: list[Node] = []
    current = start
    while max_depth is None or len(entered) < max_depth:
        child_level = current.level.child
        if child_level is None:
            break
        result = await run_step(
            catalog.get_children(child_level, current.id),
            step="descent",
            timeout=opts.query_timeout,
            context={"level": child_level.value, "parent_id": current.id},
        )
        child = result.first() if direction is Direction.FORWARD else result.last()
        if child is None:
            break
        entered.append(child)
        current = child
    return entered
