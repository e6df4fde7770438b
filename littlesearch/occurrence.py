"""
Occurrence and keyword index data structures.

An occurrence records how often a keyword appears in one document.
The keyword index maps each keyword to its occurrences, kept in
descending order of frequency by the index builder.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Occurrence:
    """
    One keyword's count in one document.
    - document: document name (as listed in the docs file)
    - frequency: number of times the keyword occurs in that document
    """

    document: str
    frequency: int

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


class KeywordIndex:
    """
    Keyword index: map from keyword -> list of occurrences.
    Each list is non-increasing by frequency and holds at most one
    occurrence per document. Writable until freeze(), read-only after.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        self._documents: set[str] = set()
        self._frozen = False

    def _check_writable(self) -> None:
        if self._frozen:
            raise RuntimeError("keyword index is frozen")

    def occurrences_for(self, keyword: str) -> list[Occurrence]:
        """Return the mutable occurrence list for a keyword, creating it if absent."""
        self._check_writable()
        if keyword not in self._index:
            self._index[keyword] = []
        return self._index[keyword]

    def get_occurrences(self, keyword: str) -> tuple[Occurrence, ...]:
        """Return the occurrences for a keyword as a tuple, or empty tuple."""
        return tuple(self._index.get(keyword, ()))

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def add_document(self, document: str) -> None:
        """Record a processed document, whether or not it had keywords."""
        self._check_writable()
        self._documents.add(document)

    def document_count(self) -> int:
        """Number of distinct documents processed."""
        return len(self._documents)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index
