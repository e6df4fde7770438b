"""Keyword index and two-keyword OR search package."""

from .occurrence import Occurrence, KeywordIndex
from .index_builder import (
    IndexBuildError,
    build_index,
    insert_last_occurrence,
    load_keywords,
    make_index,
    merge_keywords,
)
from .search_cli import top5_search, parse_or_query
from .tokenizer import get_keyword, iter_tokens
