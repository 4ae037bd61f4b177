"""Client facades."""

from .namespaces import IndicesNamespace, Namespace, WatcherNamespace
from .search_client import SearchClient

__all__ = ["SearchClient", "Namespace", "IndicesNamespace", "WatcherNamespace"]
