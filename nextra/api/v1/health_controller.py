# External package imports
from fastapi import APIRouter

# Local application imports
from ...core.config import Settings
from ...di.container import get_container


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    settings = get_container().get(Settings)
    return {
        "status": "ok",
        "store": "json",
        "data_dir": str(settings.data_dir),
    }
