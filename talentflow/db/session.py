"""
Database store configuration.

Builds the process-wide durable store from settings. The API and the scripts
resolve the store through get_default_store().
"""

from typing import Optional

from talentflow.core.config import settings
from talentflow.db.store import DurableStore

_default_store: Optional[DurableStore] = None


def get_default_store() -> DurableStore:
    """Return the store configured by DATABASE_URL, creating it on first use."""
    global _default_store
    if _default_store is None:
        _default_store = DurableStore(settings.DATABASE_URL, echo=settings.DEBUG)
    return _default_store
