"""
Centralized utility module for common paths, constants, and the text helpers
shared by the analyzer and the stopword filter.
"""
from decimal import Decimal, ROUND_HALF_UP
import re
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

# ============================================================================
# BASE PATHS
# ============================================================================
BASE_DIR = Path(__file__).resolve().parent.parent  # text_analyzer/
DATA_DIR = BASE_DIR / "data"

# ============================================================================
# ANALYSIS CONSTANTS
# ============================================================================
MOST_COMMON_LIMIT = 10
TOP_WORDS_LIMIT = 5
MIN_TOP_WORD_LENGTH = 3

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_CENTS = Decimal("0.01")


# ============================================================================
# FILE PATHS
# ============================================================================
def get_data_path(filename: str) -> Path:
    """Get path to a bundled data file."""
    return DATA_DIR / filename


# ============================================================================
# TEXT PROCESSING
# ============================================================================
def tokenize(text: str) -> List[str]:
    """
    Lowercase, strip everything that is neither a word character nor
    whitespace, then split on whitespace runs. Empty tokens never appear.
    """
    return _NON_WORD_RE.sub("", text.lower()).split()


def strip_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub("", text)


def split_sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_paragraphs(text: str) -> List[str]:
    return [p for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def word_frequency(words: Iterable[str]) -> Dict[str, int]:
    """Count tokens; dict order is first-seen order."""
    frequency: Dict[str, int] = {}
    for word in words:
        if word:
            frequency[word] = frequency.get(word, 0) + 1
    return frequency


def rank_words(frequency: Dict[str, int], limit: int) -> List[Tuple[str, int]]:
    """
    Highest counts first. sorted() is stable, so equal counts keep the
    first-seen order of the frequency table.
    """
    if limit <= 0:
        return []
    ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def round2(value: float) -> float:
    """Two decimals, halves rounded up (2.625 -> 2.63)."""
    return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def code_unit_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(text.encode("utf-16-le")) // 2
