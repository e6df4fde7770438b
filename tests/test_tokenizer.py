from pathlib import Path

import pytest

from littlesearch import tokenizer
from littlesearch.tokenizer import (
    extract_text_from_html,
    get_keyword,
    iter_tokens,
    load_noise_words,
    nltk_noise_words,
    read_docs_file,
    read_document_tokens,
)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("end.,", "end"),
        ("Hello", "hello"),
        ("WORLD?!", "world"),
        ("question:;", "question"),
        ("mi,ddle", None),
        ("2nd", None),
        ("abc123", "abc"),
        ("1abc", None),
        ("a1b", None),
        ("e-mail", None),
        ("...", None),
        ("1984", None),
        ("", None),
        (None, None),
    ],
)
def test_get_keyword(word, expected):
    assert get_keyword(word, frozenset()) == expected


def test_get_keyword_strips_trailing_only():
    assert get_keyword("'quoted'", frozenset()) is None
    assert get_keyword("done)", frozenset()) == "done"


def test_get_keyword_filters_noise_words():
    noise = {"the", "a"}
    assert get_keyword("The!", noise) is None
    assert get_keyword("A", noise) is None
    assert get_keyword("then", noise) == "then"


def test_get_keyword_is_idempotent():
    for word in ["Cat.", "dOG!!", "zebra", "Them,"]:
        once = get_keyword(word, {"them"})
        if once is not None:
            assert get_keyword(once, {"them"}) == once


def test_iter_tokens_flattens_lines():
    lines = ["Ant bee  cat.", "", "\tdog\n"]
    assert list(iter_tokens(lines)) == ["Ant", "bee", "cat.", "dog"]


def test_iter_tokens_is_lazy():
    def lines():
        yield "one two"
        raise AssertionError("should not be read")

    tokens = iter_tokens(lines())
    assert next(tokens) == "one"
    assert next(tokens) == "two"


def test_extract_text_from_html_drops_scripts():
    html = (
        "<html><head><title>Page</title><script>var x = 1;</script>"
        "<style>p { color: red; }</style></head>"
        "<body><p>Hello <b>world</b>!</p></body></html>"
    )
    text = extract_text_from_html(html)
    assert "Hello" in text
    assert "world" in text
    assert "var" not in text
    assert "color" not in text


def test_read_document_tokens_plain_text(tmp_path: Path):
    doc = tmp_path / "doc.txt"
    doc.write_text("First line.\nSecond line!\n", encoding="utf-8")
    assert list(read_document_tokens(doc)) == ["First", "line.", "Second", "line!"]


def test_read_document_tokens_html(tmp_path: Path):
    doc = tmp_path / "page.html"
    doc.write_text("<html><body><p>Deep world</p></body></html>", encoding="utf-8")
    assert list(read_document_tokens(doc)) == ["Deep", "world"]


def test_read_document_tokens_latin1_fallback(tmp_path: Path):
    doc = tmp_path / "latin.txt"
    doc.write_bytes("caf\xe9 ol\xe9".encode("latin-1"))
    assert list(read_document_tokens(doc)) == ["café", "olé"]


def test_read_document_tokens_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_document_tokens(tmp_path / "missing.txt")


def test_read_docs_file(corpus_dir: Path):
    assert read_docs_file(corpus_dir / "docs.txt") == ["doc1.txt", "doc2.txt"]


def test_load_noise_words_lowercases(tmp_path: Path):
    path = tmp_path / "noise.txt"
    path.write_text("The\nA an\n", encoding="utf-8")
    assert load_noise_words(path) == frozenset({"the", "a", "an"})


def test_nltk_noise_words_downloads_when_missing(monkeypatch):
    calls = []

    class FakeStopwords:
        def __init__(self):
            self.loaded = False

        def words(self, lang):
            assert lang == "english"
            if not self.loaded:
                raise LookupError("stopwords not found")
            return ["The", "and"]

    fake = FakeStopwords()

    def fake_download(name, quiet=False):
        calls.append(name)
        fake.loaded = True

    monkeypatch.setattr(tokenizer, "_nltk_stopwords", fake)
    monkeypatch.setattr(tokenizer, "_nltk_download", fake_download)

    assert nltk_noise_words() == frozenset({"the", "and"})
    assert calls == ["stopwords"]
