"""
Sentiment classification with a remote model and a local keyword fallback.

- RemoteSentimentSource calls a hosted binary classifier (Hugging Face
  inference API by default). Every failure surfaces as RemoteUnavailable.
- keyword_sentiment() is a pure word-list heuristic used whenever the remote
  source is missing or fails.
- SentimentClassifier ties the two together and never raises for a dead or
  slow backend: one remote attempt, bounded by the timeout, then fallback.
"""

import asyncio
import logging
import re
from typing import Any, Optional, Tuple

import httpx

from text_analyzer.config import DEFAULT_SENTIMENT_API_URL, Settings
from text_analyzer.utils.http_client import post_json
from .schemas import SentimentAnalysis
from .utility import round2

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_CHARS = 512
DEFAULT_TIMEOUT_SECONDS = 10.0

POSITIVE_WORDS = frozenset([
    "good", "great", "excellent", "amazing", "wonderful", "fantastic", "love",
    "like", "happy", "joy", "positive", "best", "awesome", "perfect",
])
NEGATIVE_WORDS = frozenset([
    "bad", "terrible", "awful", "horrible", "hate", "dislike", "sad", "angry",
    "negative", "worst", "disappointing", "poor", "frustrating",
])

# Backend label -> domain label. Binary models never emit "neutral".
_LABEL_MAP = {
    "positive": "positive",
    "pos": "positive",
    "label_1": "positive",
    "negative": "negative",
    "neg": "negative",
    "label_0": "negative",
    "neutral": "neutral",
}

_SPLIT_RE = re.compile(r"\W+")


class RemoteUnavailable(ConnectionError):
    """The remote classifier could not produce a usable answer."""


# ============================================================================
# SUMMARIES
# ============================================================================
def summarize_confidence(sentiment: str, score: float) -> str:
    percent = round(score * 100)
    if percent >= 80:
        return f"The text expresses a clearly {sentiment} sentiment ({percent}% confidence)."
    if percent >= 60:
        return f"The text leans {sentiment} ({percent}% confidence)."
    return f"The sentiment of the text is uncertain, slightly {sentiment} ({percent}% confidence)."


# ============================================================================
# FALLBACK
# ============================================================================
def keyword_sentiment(text: str) -> SentimentAnalysis:
    """Count known positive and negative words. Pure and deterministic."""
    words = _SPLIT_RE.split(text.lower())
    positive = sum(1 for w in words if w in POSITIVE_WORDS)
    negative = sum(1 for w in words if w in NEGATIVE_WORDS)

    if positive > negative:
        sentiment, score = "positive", min(0.6 + (positive - negative) * 0.1, 0.95)
    elif negative > positive:
        sentiment, score = "negative", min(0.6 + (negative - positive) * 0.1, 0.95)
    else:
        sentiment, score = "neutral", 0.5

    score = round2(score)
    return SentimentAnalysis(
        sentiment=sentiment,
        score=score,
        summary=f"Keyword-based analysis (fallback): {sentiment} with {round(score * 100)}% confidence.",
    )


# ============================================================================
# REMOTE SOURCE
# ============================================================================
def parse_candidates(payload: Any) -> Tuple[str, float]:
    """
    Pick the highest-scoring (label, score) from an inference response.
    Accepts [{label, score}, ...] and [[{label, score}, ...]].
    """
    if isinstance(payload, list) and payload and isinstance(payload[0], list):
        payload = payload[0]
    if not isinstance(payload, list) or not payload:
        raise RemoteUnavailable(f"Unexpected response shape: {type(payload).__name__}")

    best: Optional[Tuple[str, float]] = None
    for candidate in payload:
        if not isinstance(candidate, dict):
            raise RemoteUnavailable("Candidate is not an object")
        label = candidate.get("label")
        score = candidate.get("score")
        if not isinstance(label, str) or isinstance(score, bool) or not isinstance(score, (int, float)):
            raise RemoteUnavailable(f"Malformed candidate: {candidate!r}")
        if best is None or score > best[1]:
            best = (label, float(score))
    return best


class RemoteSentimentSource:
    def __init__(self,
                 api_token: Optional[str],
                 url: str = DEFAULT_SENTIMENT_API_URL,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_token = api_token
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def classify(self, text: str) -> SentimentAnalysis:
        if not self.api_token:
            raise RemoteUnavailable("Sentiment API token is not configured.")

        headers = {"Authorization": f"Bearer {self.api_token}"}
        try:
            payload = await asyncio.wait_for(
                post_json(self.url, {"inputs": text}, headers=headers,
                          timeout=self.timeout, transport=self._transport),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise RemoteUnavailable(f"Sentiment API timed out after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteUnavailable(f"Sentiment API request failed: {e}") from e
        except ValueError as e:
            raise RemoteUnavailable(f"Sentiment API returned invalid JSON: {e}") from e

        label, score = parse_candidates(payload)
        sentiment = _LABEL_MAP.get(label.strip().lower())
        if sentiment is None:
            raise RemoteUnavailable(f"Unknown sentiment label '{label}'")
        if not 0.0 <= score <= 1.0:
            raise RemoteUnavailable(f"Score out of range: {score}")

        score = round2(score)
        return SentimentAnalysis(
            sentiment=sentiment,
            score=score,
            summary=summarize_confidence(sentiment, score),
        )


# ============================================================================
# CLASSIFIER
# ============================================================================
class SentimentClassifier:
    def __init__(self,
                 remote: Optional[RemoteSentimentSource] = None,
                 max_input_chars: int = DEFAULT_MAX_INPUT_CHARS):
        self.remote = remote
        self.max_input_chars = max_input_chars

    @classmethod
    def from_settings(cls, settings: Settings,
                      transport: Optional[httpx.AsyncBaseTransport] = None) -> "SentimentClassifier":
        remote = None
        if settings.hf_api_token:
            remote = RemoteSentimentSource(
                api_token=settings.hf_api_token,
                url=settings.sentiment_api_url,
                timeout=settings.sentiment_timeout,
                transport=transport,
            )
        return cls(remote=remote, max_input_chars=settings.sentiment_max_input_chars)

    async def analyze(self, text: str) -> SentimentAnalysis:
        """
        Classify `text`. Remote failures are logged and the keyword fallback
        is returned instead; this method does not raise for them.
        """
        truncated = text[: self.max_input_chars]
        if self.remote is not None:
            try:
                return await self.remote.classify(truncated)
            except RemoteUnavailable as e:
                logger.warning("Remote sentiment unavailable, using keyword fallback: %s", e)
        return keyword_sentiment(text)
