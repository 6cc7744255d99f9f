"""DeltaWeight Documents - Per-Document Term Statistics.

A document is one non-empty input line of a class. It keeps the raw
occurrence count of every term it contains together with the TF and
combined TF-IDF weight computed for that term.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class ClassLabel(Enum):
    """The two document classes."""

    CLASS_1 = 1
    CLASS_2 = 2


@dataclass
class DocumentTermWeight:
    """Weighting data for one term inside one document.

    Attributes:
        occurrence: Raw occurrence count of the term in the document
        tf: Term frequency under the selected TF scheme
        tfidf: Combined TF x IDF weight
    """

    occurrence: int = 0
    tf: float = 0.0
    tfidf: Optional[float] = None


@dataclass
class Document:
    """A tokenized document of one class.

    Attributes:
        doc_id: Position in the ordered document list
        label: Class the document belongs to
        terms: Terms in the order they were encountered
        term_data: Term -> weighting data, only for terms present
        total: Total token count of the document
    """

    doc_id: int
    label: ClassLabel
    terms: List[str] = field(default_factory=list)
    term_data: Dict[str, DocumentTermWeight] = field(default_factory=dict)
    total: int = 0

    def add_term(self, term: str) -> None:
        """Record one occurrence of a term."""
        self.terms.append(term)
        data = self.term_data.get(term)
        if data is None:
            data = DocumentTermWeight()
            self.term_data[term] = data
        data.occurrence += 1
        self.total += 1

    def occurrence(self, term: str) -> int:
        data = self.term_data.get(term)
        return data.occurrence if data else 0

    def distinct_terms(self) -> List[str]:
        """Distinct terms of this document in lexicographic order."""
        return sorted(self.term_data)

    def tf(self, term: str) -> float:
        data = self.term_data.get(term)
        return data.tf if data else 0.0

    def weights(self) -> Dict[str, float]:
        """Term -> combined weight, ordered by term."""
        return {term: self.term_data[term].tfidf for term in self.distinct_terms()}


__all__ = ["ClassLabel", "Document", "DocumentTermWeight"]
