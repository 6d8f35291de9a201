"""Custom exceptions for coursenav."""

from __future__ import annotations


class CoursenavError(Exception):
    """Base exception for coursenav operations."""


class AnchorNotFoundError(CoursenavError):
    """The node a page claims to display does not exist or is inactive."""

    def __init__(self, level: str, node_id: str, message: str | None = None) -> None:
        self.level = level
        self.node_id = node_id
        super().__init__(message or f"{level} {node_id!r} not found")


class CatalogError(CoursenavError):
    """Error raised by a node catalog while answering a query."""


class FetchError(CatalogError):
    """Error during content API fetching."""
