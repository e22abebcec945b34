"""
Clear the durable store, returning it to its pre-seed state.

The next API request (or scripts/seed_store.py) seeds it again.

Usage:
    python scripts/reset_store.py
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path so we can import talentflow modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from talentflow.core.config import settings
from talentflow.core.logging import configure_logging
from talentflow.db.session import get_default_store


async def reset_store() -> None:
    store = get_default_store()
    try:
        await store.reset()
    finally:
        await store.dispose()
    print(f"[OK] Store reset: {settings.DATABASE_URL}")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(reset_store())
