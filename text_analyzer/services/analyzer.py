# text_analyzer/services/analyzer.py

import logging
from typing import Any, Optional

from .schemas import SentimentAnalysis, TextAnalysis, WordCount
from .sentiment import SentimentClassifier
from .stopwords import StopwordFilter
from .utility import (
    MOST_COMMON_LIMIT,
    TOP_WORDS_LIMIT,
    code_unit_length,
    rank_words,
    round2,
    split_paragraphs,
    split_sentences,
    strip_whitespace,
    tokenize,
    word_frequency,
)

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Raised when the text to analyze is missing, empty or not a string."""


class TextAnalyzer:
    """
    Stateless: one instance can serve any number of concurrent requests.
    Collaborators are injected so tests can swap the classifier.
    """

    def __init__(self,
                 stopword_filter: Optional[StopwordFilter] = None,
                 sentiment_classifier: Optional[SentimentClassifier] = None):
        self.stopword_filter = stopword_filter or StopwordFilter()
        self.sentiment_classifier = sentiment_classifier or SentimentClassifier()

    async def analyze_text(self, text: Any, include_sentiment: bool = True) -> TextAnalysis:
        if not text or not isinstance(text, str):
            raise InvalidInput("Text must be a non-empty string")

        words = tokenize(text)
        word_count = len(words)
        sentence_count = len(split_sentences(text))
        paragraph_count = max(len(split_paragraphs(text)), 1)

        frequency = word_frequency(words)
        most_common_words = [
            WordCount(word=word, count=count)
            for word, count in rank_words(frequency, MOST_COMMON_LIMIT)
        ]
        top_words = self.stopword_filter.get_top_words(words, TOP_WORDS_LIMIT)

        sentiment = None
        if include_sentiment:
            sentiment = await self._safe_sentiment(text)

        return TextAnalysis(
            character_count=code_unit_length(text),
            character_count_no_spaces=code_unit_length(strip_whitespace(text)),
            word_count=word_count,
            sentence_count=sentence_count,
            paragraph_count=paragraph_count,
            average_words_per_sentence=round2(word_count / sentence_count) if sentence_count else 0,
            most_common_words=most_common_words,
            top_words=top_words,
            sentiment=sentiment,
        )

    async def _safe_sentiment(self, text: str) -> Optional[SentimentAnalysis]:
        # Sentiment is optional; a failure here must not fail the analysis.
        try:
            return await self.sentiment_classifier.analyze(text)
        except Exception as e:
            logger.exception("Sentiment analysis failed, omitting it: %s", e)
            return None
