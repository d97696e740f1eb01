from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from text_analyzer.routes.dependencies import get_cache
from text_analyzer.services.cache import ResultCache
from text_analyzer.services.schemas import AnalysisResult, Stats

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["History"])

# ---------------------------
# Models
# ---------------------------

class SearchResponse(BaseModel):
    term: str
    results: List[AnalysisResult] = Field(default_factory=list)
    found: int
    limit: int

class HistoryResponse(BaseModel):
    total: int
    results: List[AnalysisResult] = Field(default_factory=list)

class ClearResponse(BaseModel):
    message: str

# ---------------------------
# Routes
# ---------------------------

@router.get("/search-term", response_model=SearchResponse)
def search_term(
    term: str = Query(..., description="Term to look for in previously analyzed texts."),
    limit: int = Query(10, ge=1, le=100),
    cache: ResultCache = Depends(get_cache),
):
    if not term.strip():
        raise HTTPException(status_code=400, detail="Search term is required and must be a string")

    logger.info("Searching for term '%s' (limit=%d)", term, limit)
    results = cache.search_by_term(term, limit)
    return SearchResponse(term=term, results=results, found=len(results), limit=limit)


@router.get("/history", response_model=HistoryResponse)
def history(
    limit: int = Query(10, ge=1, le=100),
    cache: ResultCache = Depends(get_cache),
):
    return HistoryResponse(total=cache.get_total_count(), results=cache.get_history(limit))


@router.get("/stats", response_model=Stats)
def stats(cache: ResultCache = Depends(get_cache)):
    return cache.get_stats()


@router.delete("/history", response_model=ClearResponse)
def clear_history(cache: ResultCache = Depends(get_cache)):
    count = cache.get_total_count()
    cache.clear()
    return ClearResponse(message=f"Cleared {count} analyses.")
