"""Node catalog implementations."""

from coursenav.catalog.base import NodeCatalog
from coursenav.catalog.http import HttpNodeCatalog
from coursenav.catalog.memory import InMemoryCatalog

__all__ = ["HttpNodeCatalog", "InMemoryCatalog", "NodeCatalog"]
