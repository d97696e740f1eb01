# text_analyzer/services/schemas.py
# Shared Pydantic models. The analyzer, the cache and the routes all speak these.

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SentimentLabel = Literal["positive", "negative", "neutral"]


class WordCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    count: int = Field(..., ge=1)


class SentimentAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    sentiment: SentimentLabel
    score: float = Field(..., ge=0.0, le=1.0)
    summary: str


class TextAnalysis(BaseModel):
    """Statistics for one analyzed text. `sentiment` is None when skipped."""
    model_config = ConfigDict(frozen=True)

    character_count: int = Field(..., ge=0)
    character_count_no_spaces: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)
    sentence_count: int = Field(..., ge=0)
    paragraph_count: int = Field(..., ge=1)
    average_words_per_sentence: float = Field(..., ge=0.0)
    most_common_words: List[WordCount] = Field(default_factory=list)
    top_words: List[WordCount] = Field(default_factory=list)
    sentiment: Optional[SentimentAnalysis] = None


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    analysis: TextAnalysis
    timestamp: str


class Stats(BaseModel):
    total_analyses: int = 0
    average_word_count: float = 0.0
    average_character_count: float = 0.0
    last_analysis: Optional[str] = None
