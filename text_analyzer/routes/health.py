from fastapi import APIRouter, Depends
from pydantic import BaseModel
import platform

from text_analyzer.routes.dependencies import get_cache
from text_analyzer.services.cache import ResultCache

router = APIRouter()

class HealthResp(BaseModel):
    status: str
    python: str
    cached_analyses: int

@router.get("/", response_model=HealthResp)
async def health(cache: ResultCache = Depends(get_cache)):
    return {
        "status": "ok",
        "python": platform.python_version(),
        "cached_analyses": cache.get_total_count(),
    }
