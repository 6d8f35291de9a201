"""coursenav: next/previous navigation for exam content trees."""

from coursenav.catalog import HttpNodeCatalog, InMemoryCatalog, NodeCatalog
from coursenav.exceptions import (
    AnchorNotFoundError,
    CatalogError,
    CoursenavError,
    FetchError,
)
from coursenav.resolver import (
    NavigationResolver,
    ResolveOptions,
    get_next,
    get_previous,
    resolve_navigation,
)
from coursenav.routes import RoutePosition, resolve_route
from coursenav.schemas import Direction, Level, NavigationTarget, Node, NodeStatus
from coursenav.slugs import create_slug, find_by_slug_or_id, unique_slug

__all__ = [
    "AnchorNotFoundError",
    "CatalogError",
    "CoursenavError",
    "Direction",
    "FetchError",
    "HttpNodeCatalog",
    "InMemoryCatalog",
    "Level",
    "NavigationResolver",
    "NavigationTarget",
    "Node",
    "NodeCatalog",
    "NodeStatus",
    "ResolveOptions",
    "RoutePosition",
    "create_slug",
    "find_by_slug_or_id",
    "get_next",
    "get_previous",
    "resolve_navigation",
    "resolve_route",
    "unique_slug",
]
