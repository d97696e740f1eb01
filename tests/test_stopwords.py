from text_analyzer.services.stopwords import StopwordFilter, load_stopwords
from text_analyzer.services.utility import tokenize

stopwords = StopwordFilter()


def test_bundled_table_has_english_and_portuguese():
    words = load_stopwords()
    assert {"the", "and", "is", "de", "que", "não"} <= words


def test_top_words_exclude_stopwords_and_short_tokens():
    words = tokenize("The big dog and the cat. The dog is very big and beautiful. Ox ox ox")
    top = stopwords.get_top_words(words, 5)
    found = [w.word for w in top]
    assert "the" not in found
    assert "and" not in found
    assert "ox" not in found
    assert found[:2] == ["big", "dog"]
    assert all(not stopwords.is_stopword(w) for w in found)


def test_ties_keep_first_seen_order():
    top = stopwords.get_top_words(["zebra", "apple", "mango", "apple", "zebra"], 5)
    assert [(w.word, w.count) for w in top] == [("zebra", 2), ("apple", 2), ("mango", 1)]


def test_custom_table_and_limits():
    f = StopwordFilter(words=["Foo"], min_word_length=1)
    assert f.is_stopword("foo")
    assert [w.word for w in f.get_top_words(["foo", "a", "bar"], 1)] == ["a"]
    assert f.get_top_words(["bar"], 0) == []


def test_custom_table_from_file(tmp_path):
    path = tmp_path / "stop.txt"
    path.write_text("# comment\nalpha\n\nBETA\n", encoding="utf-8")
    f = StopwordFilter(path=path)
    assert f.words == frozenset({"alpha", "beta"})
