"""
Defaults for building and searching the keyword index, and logging setup.
"""

import logging
import os

# Maximum number of documents returned by a search
TOP_K = 5

DEFAULT_DOCS_FILE = "docs.txt"  # One document file name per line
DEFAULT_NOISE_WORDS_FILE = "noisewords.txt"  # One noise word per line

# Documents with these suffixes are parsed as HTML before tokenizing
HTML_SUFFIXES = {".html", ".htm"}

# Encodings tried, in order, when reading documents
DOCUMENT_ENCODINGS = ("utf-8", "latin-1", "cp1252")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = os.environ.get("LITTLESEARCH_LOG_LEVEL", "WARNING")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the command-line tools."""
    level_name = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
    )
