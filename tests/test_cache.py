from concurrent.futures import ThreadPoolExecutor
import threading

from text_analyzer.services.cache import ResultCache
from text_analyzer.services.schemas import AnalysisResult, TextAnalysis


def make_result(text: str, word_count: int = 10, timestamp: str = "2025-01-01T00:00:00+00:00") -> AnalysisResult:
    return AnalysisResult(
        text=text,
        analysis=TextAnalysis(
            character_count=len(text),
            character_count_no_spaces=len(text.replace(" ", "")),
            word_count=word_count,
            sentence_count=1,
            paragraph_count=1,
            average_words_per_sentence=word_count,
        ),
        timestamp=timestamp,
    )


def test_add_puts_newest_first():
    cache = ResultCache()
    first, second = make_result("first text"), make_result("second text")
    cache.add_analysis(first)
    cache.add_analysis(second)
    assert cache.get_total_count() == 2
    assert cache.get_history(2) == [second, first]


def test_history_limits_are_clamped():
    cache = ResultCache()
    assert cache.get_history(10) == []
    for i in range(5):
        cache.add_analysis(make_result(f"text {i}"))
    assert len(cache.get_history(3)) == 3
    assert len(cache.get_history(50)) == 5
    assert cache.get_history(0) == []
    assert cache.get_history(-4) == []


def test_capacity_evicts_oldest_first():
    cache = ResultCache(max_size=1000)
    for i in range(1005):
        cache.add_analysis(make_result(f"entry {i}"))
    assert cache.get_total_count() == 1000
    history = cache.get_history(1000)
    assert history[0].text == "entry 1004"
    assert history[-1].text == "entry 5"
    assert {"entry 0", "entry 4"}.isdisjoint(r.text for r in history)


def test_small_capacity_never_exceeded():
    cache = ResultCache(max_size=3)
    for i in range(10):
        cache.add_analysis(make_result(f"t{i}"))
        assert cache.get_total_count() <= 3


def test_search_is_case_insensitive_and_ordered():
    cache = ResultCache()
    cache.add_analysis(make_result("This is a wonderful day!"))
    cache.add_analysis(make_result("Another example text"))
    cache.add_analysis(make_result("A TEST of search"))
    cache.add_analysis(make_result("one more test"))

    upper = cache.search_by_term("TEST")
    lower = cache.search_by_term("test")
    assert upper == lower
    assert [r.text for r in lower] == ["one more test", "A TEST of search"]
    assert [r.text for r in cache.search_by_term("  Wonderful ")] == ["This is a wonderful day!"]
    assert len(cache.search_by_term("test", limit=1)) == 1
    assert cache.search_by_term("missing") == []


def test_search_blank_term_returns_empty():
    cache = ResultCache()
    cache.add_analysis(make_result("anything"))
    assert cache.search_by_term("", limit=10) == []
    assert cache.search_by_term("   ", limit=10) == []


def test_search_matches_text_only():
    cache = ResultCache()
    cache.add_analysis(make_result("plain words", word_count=42))
    assert cache.search_by_term("42") == []


def test_stats():
    cache = ResultCache()
    cache.add_analysis(make_result("text 1", 5, timestamp="2025-01-01T00:00:00+00:00"))
    cache.add_analysis(make_result("text 2 longer", 10, timestamp="2025-01-02T00:00:00+00:00"))
    stats = cache.get_stats()
    assert stats.total_analyses == 2
    assert stats.average_word_count == 7.5
    assert stats.average_character_count == 9.5
    assert stats.last_analysis == "2025-01-02T00:00:00+00:00"


def test_stats_empty():
    stats = ResultCache().get_stats()
    assert (stats.total_analyses, stats.average_word_count,
            stats.average_character_count, stats.last_analysis) == (0, 0, 0, None)


def test_clear():
    cache = ResultCache()
    cache.add_analysis(make_result("test"))
    cache.clear()
    assert cache.get_total_count() == 0
    assert cache.get_history() == []


def test_stats_round_halves_up():
    cache = ResultCache()
    for words in [3, 3, 3, 3, 3, 2, 2, 2]:
        cache.add_analysis(make_result("x", words))
    assert cache.get_stats().average_word_count == 2.63


def test_concurrent_writers_and_readers():
    cache = ResultCache(max_size=1000)
    writers_done = threading.Event()

    def write(worker: int):
        for i in range(500):
            cache.add_analysis(make_result(f"worker {worker} entry {i}", word_count=i % 7 + 1))

    def read():
        reads = 0
        while not writers_done.is_set() or reads == 0:
            cache.get_history(50)
            cache.search_by_term("entry 1")
            cache.get_stats()
            reads += 1
        return reads

    with ThreadPoolExecutor(max_workers=11) as pool:
        readers = [pool.submit(read) for _ in range(3)]
        writers = [pool.submit(write, w) for w in range(8)]
        try:
            for f in writers:
                f.result()
        finally:
            writers_done.set()
        for f in readers:
            assert f.result() > 0

    assert cache.get_total_count() == 1000
    assert len(cache.get_history(2000)) == 1000
    assert cache.get_stats().total_analyses == 1000
