"""Health check router."""

from pathlib import Path
from typing import Optional

from alembic.config import Config
from alembic.script import ScriptDirectory
from fastapi import APIRouter, Depends

from talentflow.core.dependencies import get_backend
from talentflow.services.backend import MockBackend

router = APIRouter()


def _load_alembic_head() -> Optional[str]:
    project_root = Path(__file__).resolve().parents[2]
    cfg_path = project_root / "alembic.ini"
    script_location = project_root / "alembic"
    if not cfg_path.exists() or not script_location.exists():
        return None

    config = Config(str(cfg_path))
    config.set_main_option("script_location", str(script_location))
    script = ScriptDirectory.from_config(config)
    return script.get_current_head()


@router.get("/health")
async def health_check(backend: MockBackend = Depends(get_backend)):
    """Lightweight health endpoint: store reachability, seed flag, migration head."""
    status = await backend.health()

    try:
        alembic_head = _load_alembic_head()
    except Exception:
        alembic_head = None

    return {**status, "alembic_head": alembic_head}
