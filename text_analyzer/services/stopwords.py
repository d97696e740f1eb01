# text_analyzer/services/stopwords.py

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Union

from .schemas import WordCount
from .utility import MIN_TOP_WORD_LENGTH, get_data_path, rank_words, word_frequency

logger = logging.getLogger(__name__)

DEFAULT_STOPWORDS_FILE = get_data_path("stopwords.txt")


def load_stopwords(path: Union[str, Path] = DEFAULT_STOPWORDS_FILE) -> FrozenSet[str]:
    """Read a one-word-per-line table. Blank lines and '#' comments are skipped."""
    words = set()
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            word = line.strip().lower()
            if word and not word.startswith("#"):
                words.add(word)
    logger.info("Loaded %d stopwords from %s", len(words), path)
    return frozenset(words)


class StopwordFilter:
    def __init__(self,
                 words: Optional[Iterable[str]] = None,
                 path: Optional[Union[str, Path]] = None,
                 min_word_length: int = MIN_TOP_WORD_LENGTH):
        if words is not None:
            self._words = frozenset(w.lower() for w in words)
        else:
            self._words = load_stopwords(path or DEFAULT_STOPWORDS_FILE)
        self.min_word_length = min_word_length

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def is_stopword(self, word: str) -> bool:
        return word.lower() in self._words

    def get_top_words(self, words: Iterable[str], limit: int) -> List[WordCount]:
        """
        Most frequent tokens that are neither stopwords nor shorter than
        `min_word_length`. Expects already-lowercased tokens.
        """
        kept = (
            w for w in words
            if len(w) >= self.min_word_length and w not in self._words
        )
        return [
            WordCount(word=word, count=count)
            for word, count in rank_words(word_frequency(kept), limit)
        ]
