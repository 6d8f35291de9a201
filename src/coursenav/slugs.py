"""Slug derivation and id-or-slug lookup among sibling nodes."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Collection, Iterable

if TYPE_CHECKING:
    from coursenav.schemas.node import Node

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^a-z0-9-]")


def create_slug(name: str | None) -> str:
    """Derive a URL-safe slug from a display name.

    Lowercases the name, replaces whitespace runs with a single hyphen and
    strips every character outside ``[a-z0-9-]``. Not collision-free:
    "C++ Basics" and "C Basics" both become "c-basics".
    """
    if not name:
        return ""
    slug = _WHITESPACE_RE.sub("-", name.lower())
    return _UNSAFE_RE.sub("", slug)


def find_by_slug_or_id(siblings: Iterable[Node], key: str | None) -> Node | None:
    """Resolve a route segment to one of ``siblings``.

    A sibling matches when its id equals ``key``, when its slug equals the
    slug of ``key``, or when its name equals ``key`` ignoring case. The first
    sibling matching any rule wins, so duplicate slugs resolve to the
    earliest sibling in order.

    Args:
        siblings: Candidate nodes, already in sibling order.
        key: Raw route segment (an id, a slug or a display name).

    Returns:
        The matching node, or None if nothing matches.
    """
    if not key:
        return None
    key_slug = create_slug(key)
    key_lower = key.lower()
    for node in siblings:
        if node.id == key:
            return node
        if key_slug and key_slug in (node.route_slug, create_slug(node.name)):
            return node
        if node.name.lower() == key_lower:
            return node
    return None


def unique_slug(base: str, taken: Collection[str]) -> str:
    """Return ``base`` or the first free ``base-N`` suffix (N >= 1)."""
    if base not in taken:
        return base
    counter = 1
    while f"{base}-{counter}" in taken:
        counter += 1
    return f"{base}-{counter}"
