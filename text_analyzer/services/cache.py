"""
In-memory history of analysis results.

Newest entries sit at the head. Once `max_size` is reached every insert drops
the oldest entry. Nothing is persisted; a restart starts empty.
"""

from collections import deque
import logging
import threading
from typing import Deque, List

from .schemas import AnalysisResult, Stats
from .utility import round2

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1000


class ResultCache:
    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._lock = threading.RLock()
        self._analyses: Deque[AnalysisResult] = deque(maxlen=max_size)

    def _snapshot(self) -> List[AnalysisResult]:
        with self._lock:
            return list(self._analyses)

    def add_analysis(self, result: AnalysisResult) -> None:
        with self._lock:
            # deque(maxlen) evicts from the tail when appending on the left
            self._analyses.appendleft(result)

    def get_history(self, limit: int = 10) -> List[AnalysisResult]:
        if limit <= 0:
            return []
        with self._lock:
            return [self._analyses[i] for i in range(min(limit, len(self._analyses)))]

    def search_by_term(self, term: str, limit: int = 10) -> List[AnalysisResult]:
        needle = (term or "").strip().lower()
        if not needle or limit <= 0:
            return []

        matches: List[AnalysisResult] = []
        for result in self._snapshot():
            if needle in result.text.lower():
                matches.append(result)
                if len(matches) >= limit:
                    break
        return matches

    def get_total_count(self) -> int:
        with self._lock:
            return len(self._analyses)

    def get_stats(self) -> Stats:
        analyses = self._snapshot()
        if not analyses:
            return Stats()

        total = len(analyses)
        total_words = sum(a.analysis.word_count for a in analyses)
        total_chars = sum(a.analysis.character_count for a in analyses)
        return Stats(
            total_analyses=total,
            average_word_count=round2(total_words / total),
            average_character_count=round2(total_chars / total),
            last_analysis=analyses[0].timestamp,
        )

    def clear(self) -> None:
        with self._lock:
            count = len(self._analyses)
            self._analyses.clear()
        logger.info("Cleared %d cached analyses", count)
