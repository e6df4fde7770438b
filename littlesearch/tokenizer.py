"""
Keyword extraction and document/noise-word readers for the keyword index.
Splits documents into whitespace-delimited tokens and turns tokens into keywords.
Supports plain text documents and HTML documents (visible text only).
"""

import logging
import warnings
from pathlib import Path
from typing import AbstractSet, Iterable, Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk import download as _nltk_download
from nltk.corpus import stopwords as _nltk_stopwords
from nltk.tokenize import WhitespaceTokenizer

from .config import DOCUMENT_ENCODINGS, HTML_SUFFIXES

logger = logging.getLogger(__name__)

_TOKENIZER = WhitespaceTokenizer()


def get_keyword(word: str | None, noise_words: AbstractSet[str] = frozenset()) -> str | None:
    """
    Return word as a keyword, or None if it is not one.

    A keyword is a word that, once stripped of TRAILING non-letters, consists
    only of letters and is not a noise word. Keywords are lower case.
    "end.," -> "end", "mi,ddle" -> None, "2nd" -> None.
    """
    if not word:
        return None
    end = len(word)
    while end > 0 and not word[end - 1].isalpha():
        end -= 1
    word = word[:end]
    if not word or not word.isalpha():
        return None
    word = word.lower()
    if word in noise_words:
        return None
    return word


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield whitespace-delimited tokens from lines of text.
    Line boundaries carry no meaning; tokens come out as one flat stream.
    """
    for line in lines:
        yield from _TOKENIZER.tokenize(line)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    """
    for encoding in DOCUMENT_ENCODINGS:
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def read_document_tokens(filepath: Path) -> Iterator[str]:
    """
    Read a document and return an iterator over its raw tokens.
    The file is read immediately, so a missing document fails here
    rather than midway through indexing.
    """
    filepath = Path(filepath)
    content = read_text_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    return iter_tokens(content.splitlines())


def read_docs_file(filepath: Path) -> list[str]:
    """Return the document names listed in a docs file (whitespace separated)."""
    return list(iter_tokens(read_text_file(filepath).splitlines()))


def load_noise_words(filepath: Path) -> frozenset[str]:
    """
    Load noise words from a file, whitespace separated, folded to lower case.
    """
    words = frozenset(
        w.lower() for w in iter_tokens(read_text_file(filepath).splitlines())
    )
    logger.debug("Loaded %d noise words from %s", len(words), filepath)
    return words


def nltk_noise_words() -> frozenset[str]:
    """
    Return NLTK's English stopword list as noise words.
    Downloads the stopwords corpus the first time it is missing.
    """
    try:
        words = _nltk_stopwords.words("english")
    except LookupError:
        logger.warning("NLTK stopwords corpus not found. Downloading...")
        _nltk_download("stopwords", quiet=True)
        words = _nltk_stopwords.words("english")
    return frozenset(w.lower() for w in words)
