"""Guarded catalog queries for the fail-soft traversal.

Each resolver step issues one catalog query through :func:`run_step`. A
query that raises or times out becomes a failed :class:`StepResult` rather
than an exception, so the resolver can fall through to its next tier.
Cancellation of the calling task is never converted.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Mapping, Sequence

from coursenav.schemas.node import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one catalog query: nodes found, nothing found, or failed.

    Attributes:
        nodes: Nodes returned by the query, in sibling order.
        error: The exception that made the query fail, if any.
    """

    nodes: tuple[Node, ...] = ()
    error: BaseException | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def empty(self) -> bool:
        return not self.nodes

    def first(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    def last(self) -> Node | None:
        return self.nodes[-1] if self.nodes else None


async def run_step(
    query: Awaitable[Sequence[Node] | Node | None],
    *,
    step: str,
    timeout: float | None,
    context: Mapping[str, Any] | None = None,
) -> StepResult:
    """Await a catalog query under a timeout and classify its outcome.

    Args:
        query: The catalog coroutine to await.
        step: Short name of the step, used in log records.
        timeout: Seconds before the query counts as failed; None disables it.
        context: Extra fields attached to the log record on failure.

    Returns:
        A StepResult holding the nodes, or the error that stopped the query.
    """
    try:
        result = await asyncio.wait_for(query, timeout=timeout)
    except asyncio.TimeoutError as exc:
        logger.warning(
            "Catalog query timed out during %s",
            step,
            extra={"step": step, "timeout": timeout, **(context or {})},
        )
        return StepResult(error=exc)
    except Exception as exc:
        logger.warning(
            "Catalog query failed during %s: %s",
            step,
            exc,
            extra={"step": step, "error": str(exc), **(context or {})},
        )
        return StepResult(error=exc)

    if result is None:
        return StepResult()
    if isinstance(result, Node):
        return StepResult(nodes=(result,))
    return StepResult(nodes=tuple(result))
