"""
Build the keyword index and print index analytics.

Usage:
    python build_index.py --docs docs.txt --noise noisewords.txt

The docs file lists the document file names to index (relative names are
resolved against the docs file's directory). Optionally answers one
"kw1 or kw2" query against the finished index.

Output:
  - Analytics table printed to console (documents, unique keywords)
  - Top 5 documents for --query, if given
"""

import argparse
import logging
import sys
from pathlib import Path

from littlesearch.config import DEFAULT_DOCS_FILE, TOP_K, configure_logging
from littlesearch.index_builder import IndexBuildError, make_index
from littlesearch.search_cli import format_results, parse_or_query, top5_search

logger = logging.getLogger("build_index")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build keyword index over a document set")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path(DEFAULT_DOCS_FILE),
        help="File listing document file names (default: docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=None,
        help="Noise words file, one word per line",
    )
    parser.add_argument(
        "--nltk-stopwords",
        action="store_true",
        help="Also treat NLTK's English stopwords as noise words",
    )
    parser.add_argument(
        "--query",
        default=None,
        help="Query to answer after building, e.g. 'deep or world'",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    query = None
    if args.query is not None:
        query = parse_or_query(args.query)
        if query is None:
            print("Query must be of the form: kw1 or kw2")
            return 2

    try:
        index = make_index(args.docs, args.noise, use_nltk_stopwords=args.nltk_stopwords)
    except IndexBuildError as e:
        logger.error("Index build failed: %s", e)
        return 1

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {index.document_count()} |")
    print(f"| Number of unique keywords   | {len(index)} |")
    print()
    print("=" * 50)

    if query is not None:
        print()
        print(format_results(query, top5_search(index, query[0], query[1], limit=TOP_K)))
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
