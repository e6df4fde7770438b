"""
Search component for the keyword index.

- Answers "kw1 or kw2" queries with the top 5 documents, by frequency.
- A document matching both keywords is listed once.
- Ties in frequency go to the first keyword's document.

Usage (from repo root):
    python -m littlesearch.search_cli \
        --docs docs.txt \
        --noise noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from .config import (
    DEFAULT_DOCS_FILE,
    DEFAULT_NOISE_WORDS_FILE,
    TOP_K,
    configure_logging,
)
from .index_builder import IndexBuildError, make_index
from .occurrence import KeywordIndex, Occurrence

logger = logging.getLogger(__name__)


class _ResultBuffer:
    """Bounded, duplicate-free list of document names."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.documents: List[str] = []
        self._seen: Set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.documents) >= self.limit

    def offer(self, occ: Occurrence) -> None:
        if occ.document in self._seen:
            return
        self._seen.add(occ.document)
        self.documents.append(occ.document)


def top5_search(
    index: KeywordIndex,
    kw1: str,
    kw2: str,
    limit: int = TOP_K,
) -> Optional[List[str]]:
    """
    Search result for "kw1 or kw2".

    Returns up to `limit` document names in which kw1 or kw2 occurs, in
    descending order of frequency, or None if neither keyword is indexed.
    Raises ValueError if limit is less than 1.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    has1 = kw1 in index
    has2 = kw2 in index
    if not has1 and not has2:
        return None
    # A single list never repeats a document, so no duplicate check is needed.
    if not has2:
        return [occ.document for occ in index.get_occurrences(kw1)[:limit]]
    if not has1:
        return [occ.document for occ in index.get_occurrences(kw2)[:limit]]

    list1 = index.get_occurrences(kw1)
    list2 = index.get_occurrences(kw2)
    result = _ResultBuffer(limit)
    i = j = 0
    while i < len(list1) and j < len(list2) and not result.full:
        if list1[i].frequency >= list2[j].frequency:
            result.offer(list1[i])
            i += 1
        else:
            result.offer(list2[j])
            j += 1
    while i < len(list1) and not result.full:
        result.offer(list1[i])
        i += 1
    while j < len(list2) and not result.full:
        result.offer(list2[j])
        j += 1
    return result.documents


def parse_or_query(raw_query: str) -> Optional[Tuple[str, str]]:
    """
    Parse "kw1 or kw2" into a pair of lower-case keywords.
    Returns None if the query does not have exactly that shape.
    """
    parts = raw_query.split()
    if len(parts) != 3 or parts[1].lower() != "or":
        return None
    return parts[0].lower(), parts[2].lower()


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def format_results(query: Tuple[str, str], results: Optional[List[str]]) -> str:
    if not results:
        return f"No documents matched '{query[0]} or {query[1]}'."
    lines = [f"Top {len(results)} results:"]
    for rank, document in enumerate(results, start=1):
        lines.append(f"{rank:2d}. {document}")
    return "\n".join(lines)


def run_search_loop(index: KeywordIndex, top_k: int = TOP_K) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Indexed {index.document_count()} documents, {len(index)} keywords.")
    print("Enter queries as 'kw1 or kw2'. Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        query = parse_or_query(raw_query)
        if query is None:
            print("Query must be of the form: kw1 or kw2")
            continue

        results = top5_search(index, query[0], query[1], limit=top_k)
        print(format_results(query, results))


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Two-keyword OR search over a document set.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path(DEFAULT_DOCS_FILE),
        help="File listing the document file names to index.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=None,
        help=f"Noise words file (e.g. {DEFAULT_NOISE_WORDS_FILE}).",
    )
    parser.add_argument(
        "--nltk-stopwords",
        action="store_true",
        help="Also treat NLTK's English stopwords as noise words.",
    )
    parser.add_argument(
        "--top",
        type=positive_int,
        default=TOP_K,
        help="Number of top results to show.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: WARNING or $LITTLESEARCH_LOG_LEVEL).",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.log_level)

    try:
        index = make_index(
            args.docs,
            args.noise,
            use_nltk_stopwords=args.nltk_stopwords,
        )
    except IndexBuildError as e:
        logger.error("Index build failed: %s", e)
        return 1

    run_search_loop(index, top_k=args.top)
    return 0


if __name__ == "__main__":
    sys.exit(main())
