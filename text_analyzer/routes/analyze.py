from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator

from text_analyzer.routes.dependencies import get_analyzer, get_cache
from text_analyzer.services.analyzer import InvalidInput, TextAnalyzer
from text_analyzer.services.cache import ResultCache
from text_analyzer.services.schemas import AnalysisResult

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Text Analysis"])

MAX_TEXT_LENGTH = 100_000


class AnalyzeRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH, description="Text to analyze.")
    include_sentiment: bool = True

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text cannot be empty")
        return v


@router.post("/analyze-text", response_model=AnalysisResult)
async def analyze_text(
    req: AnalyzeRequest,
    analyzer: TextAnalyzer = Depends(get_analyzer),
    cache: ResultCache = Depends(get_cache),
):
    logger.info("Analyzing text (length=%d, sentiment=%s)", len(req.text), req.include_sentiment)
    try:
        analysis = await analyzer.analyze_text(req.text, include_sentiment=req.include_sentiment)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Error analyzing text: %s", e)
        raise HTTPException(status_code=500, detail="Internal server error while analyzing text")

    result = AnalysisResult(
        text=req.text,
        analysis=analysis,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    cache.add_analysis(result)
    return result
