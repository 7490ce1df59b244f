from .catalog import get_catalog
from .store import session_store

__all__ = ["session_store", "get_catalog"]
