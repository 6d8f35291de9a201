"""Node catalog backed by the content REST API."""

from __future__ import annotations

import logging
from typing import Any, Sequence
from urllib.parse import quote

import httpx

from coursenav.config import COURSENAV_API_BASE_URL
from coursenav.exceptions import FetchError
from coursenav.http_utils import NotFoundError, build_client, fetch_json_with_retries
from coursenav.ordering import order_siblings
from coursenav.schemas.node import Level, Node

logger = logging.getLogger(__name__)


class HttpNodeCatalog:
    """Query the content API for active, ordered nodes.

    The API wraps every payload as ``{"success": bool, "data": ...}``. Lists
    are filtered and sorted on the client side, since the API returns
    inactive records and does not guarantee order.

    Use as an async context manager when the catalog owns its client::

        async with HttpNodeCatalog() as catalog:
            target = await get_next(catalog, Level.TOPIC, chain)
    """

    def __init__(
        self,
        base_url: str = COURSENAV_API_BASE_URL,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or build_client(base_url)

    async def __aenter__(self) -> HttpNodeCatalog:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_node(self, level: Level, node_id: str) -> Node | None:
        # Ids are opaque; escape them so "/", "?" or "#" stay inside the segment.
        path = f"/{level.value}/{quote(node_id, safe='')}"
        try:
            payload = await fetch_json_with_retries(self._client, path)
        except NotFoundError:
            return None
        data = _unwrap(payload, path)
        if not isinstance(data, dict):
            return None
        node = Node.from_document(level, data)
        return node if node.is_active else None

    async def get_children(self, level: Level, parent_id: str) -> Sequence[Node]:
        parent_key = level.parent_key
        if parent_key is None:
            return await self.get_roots()
        nodes = await self._list(level, params={parent_key: parent_id})
        return order_siblings(node for node in nodes if node.parent_id == parent_id)

    async def get_siblings(self, level: Level, parent_id: str | None) -> Sequence[Node]:
        if level is Level.EXAM or parent_id is None:
            return await self.get_roots()
        return await self.get_children(level, parent_id)

    async def get_roots(self) -> Sequence[Node]:
        return order_siblings(await self._list(Level.EXAM))

    async def _list(self, level: Level, params: dict[str, str] | None = None) -> list[Node]:
        path = f"/{level.value}"
        payload = await fetch_json_with_retries(self._client, path, params=params)
        data = _unwrap(payload, path)
        if not isinstance(data, list):
            raise FetchError(f"Expected a list from {path}, got {type(data).__name__}")
        nodes = []
        for doc in data:
            try:
                nodes.append(Node.from_document(level, doc))
            except (TypeError, ValueError) as exc:
                logger.warning("Skipping malformed %s document: %s", level.value, exc)
        return nodes


def _unwrap(payload: Any, path: str) -> Any:
    if not isinstance(payload, dict) or not payload.get("success"):
        raise FetchError(f"Unsuccessful response from {path}")
    return payload.get("data")
