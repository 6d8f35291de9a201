"""Shared schemas for coursenav."""

from coursenav.schemas.navigation import Direction, NavigationTarget
from coursenav.schemas.node import Level, Node, NodeStatus

__all__ = ["Direction", "Level", "NavigationTarget", "Node", "NodeStatus"]
