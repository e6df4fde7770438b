"""
Index builder: constructs the keyword index from documents.
Each document's keywords are counted locally, then merged into the index
one occurrence at a time, keeping every occurrence list in descending
order of frequency.
"""

import dataclasses
import logging
from pathlib import Path
from typing import AbstractSet, Iterable, Iterator

from .occurrence import KeywordIndex, Occurrence
from .tokenizer import (
    get_keyword,
    load_noise_words,
    nltk_noise_words,
    read_docs_file,
    read_document_tokens,
)

logger = logging.getLogger(__name__)


class IndexBuildError(RuntimeError):
    """A docs file, document or noise-word file could not be read."""


def load_keywords(
    document: str,
    tokens: Iterable[str],
    noise_words: AbstractSet[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Count the keywords in one document.
    Returns keyword -> Occurrence(document, frequency in this document).
    """
    noise_words = frozenset(noise_words)
    keywords: dict[str, Occurrence] = {}
    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is None:
            continue
        occ = keywords.get(keyword)
        if occ is None:
            keywords[keyword] = Occurrence(document, 1)
        else:
            keywords[keyword] = dataclasses.replace(occ, frequency=occ.frequency + 1)
    return keywords


def insert_last_occurrence(occs: list[Occurrence]) -> list[int]:
    """
    Move the last occurrence of occs into place by descending frequency.

    occs[0..n-2] must already be in descending order; only occs[n-1] may be
    out of place. The spot is found by binary search. On a frequency tie
    the new occurrence goes ahead of the equal occurrence found by the search.

    Returns the midpoint indexes probed by the search, in order
    (empty when occs has a single element).
    """
    assert occs, "insert_last_occurrence needs a non-empty list"
    lo, hi = 0, len(occs) - 2
    mid = 0
    freq = occs[-1].frequency
    midpoints: list[int] = []
    while lo <= hi:
        mid = (lo + hi) // 2
        midpoints.append(mid)
        if freq == occs[mid].frequency:
            occs.insert(mid, occs.pop())
            return midpoints
        if freq < occs[mid].frequency:
            lo = mid + 1
        else:
            hi = mid - 1
    if freq < occs[mid].frequency:
        occs.insert(mid + 1, occs.pop())
    else:
        occs.insert(mid, occs.pop())
    return midpoints


def merge_keywords(index: KeywordIndex, keywords: dict[str, Occurrence]) -> None:
    """
    Merge one document's keywords into the index.
    Each occurrence is appended to its keyword's list and then moved into place.
    """
    for keyword, occ in keywords.items():
        occs = index.occurrences_for(keyword)
        occs.append(occ)
        insert_last_occurrence(occs)


def build_index(
    documents: Iterable[tuple[str, Iterable[str]]],
    noise_words: Iterable[str] = frozenset(),
) -> KeywordIndex:
    """
    Build a keyword index from (document name, raw tokens) pairs, in order.
    Any error raised while reading documents aborts the build.
    Returns the frozen index.
    """
    noise_words = frozenset(noise_words)
    index = KeywordIndex()
    for document, tokens in documents:
        keywords = load_keywords(document, tokens, noise_words)
        merge_keywords(index, keywords)
        index.add_document(document)
        logger.debug("Indexed %s: %d distinct keywords", document, len(keywords))
    index.freeze()
    logger.info("Built index: %d documents, %d keywords", index.document_count(), len(index))
    return index


def _iter_documents(docs_file: Path) -> Iterator[tuple[str, Iterator[str]]]:
    """
    Yield (document name, tokens) for each document listed in docs_file.
    Relative names are resolved against the docs file's directory.
    """
    try:
        names = read_docs_file(docs_file)
    except (OSError, ValueError) as e:
        raise IndexBuildError(f"could not read docs file {docs_file}: {e}") from e
    base = docs_file.parent
    for name in names:
        path = Path(name)
        if not path.is_absolute():
            path = base / path
        try:
            tokens = read_document_tokens(path)
        except (OSError, ValueError) as e:
            raise IndexBuildError(f"could not read document {name}: {e}") from e
        yield name, tokens


def make_index(
    docs_file: Path,
    noise_words_file: Path | None = None,
    *,
    use_nltk_stopwords: bool = False,
) -> KeywordIndex:
    """
    Build a keyword index from the documents listed in docs_file.
    Noise words are loaded once, before any document, from noise_words_file
    and/or NLTK's English stopwords.
    Raises IndexBuildError if any input file cannot be read.
    """
    docs_file = Path(docs_file)
    noise_words: set[str] = set()
    if noise_words_file is not None:
        try:
            noise_words |= load_noise_words(Path(noise_words_file))
        except (OSError, ValueError) as e:
            raise IndexBuildError(
                f"could not read noise words file {noise_words_file}: {e}"
            ) from e
    if use_nltk_stopwords:
        try:
            noise_words |= nltk_noise_words()
        except (LookupError, OSError) as e:
            raise IndexBuildError(f"could not load NLTK stopwords: {e}") from e
    return build_index(_iter_documents(docs_file), noise_words)
