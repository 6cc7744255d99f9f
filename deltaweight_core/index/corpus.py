"""DeltaWeight Corpus - Corpus-Wide Term Statistics.

The corpus context is the explicit state of one weighting run: per-term
class occurrence counts, class token totals and the ordered documents.
Every pipeline phase receives it as an argument; nothing is shared at
module level.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from deltaweight_core.index.document import ClassLabel, Document

# Smallest positive double, so any real TF replaces it
MIN_TF = 5e-324


@dataclass
class CorpusTermStats:
    """Corpus statistics for one term.

    Attributes:
        corpus1_occurrence: Occurrences in class 1 documents
        corpus2_occurrence: Occurrences in class 2 documents
        idf: IDF value, None until computed
        max_tf: Maximum natural TF across documents (augmented TF only)
    """

    corpus1_occurrence: int = 0
    corpus2_occurrence: int = 0
    idf: Optional[float] = None
    max_tf: float = MIN_TF

    def increment(self, label: ClassLabel) -> None:
        if label is ClassLabel.CLASS_1:
            self.corpus1_occurrence += 1
        else:
            self.corpus2_occurrence += 1


@dataclass(frozen=True)
class ClassTotals:
    """Total token counts per class."""

    class1_total: int = 0
    class2_total: int = 0


@dataclass
class CorpusContext:
    """State of one weighting run.

    Attributes:
        term_stats: Term -> corpus statistics
        class_totals: Token totals per class
        documents: Class 1 documents followed by class 2 documents
    """

    term_stats: Dict[str, CorpusTermStats] = field(default_factory=dict)
    class_totals: ClassTotals = field(default_factory=ClassTotals)
    documents: List[Document] = field(default_factory=list)

    @property
    def vocabulary(self) -> List[str]:
        """Distinct terms in lexicographic order."""
        return sorted(self.term_stats)

    def stats(self, term: str) -> Optional[CorpusTermStats]:
        return self.term_stats.get(term)

    def iter_terms(self) -> Iterator[Tuple[str, CorpusTermStats]]:
        """Iterate (term, stats) pairs in vocabulary order."""
        for term in self.vocabulary:
            yield term, self.term_stats[term]

    def documents_of(self, label: ClassLabel) -> List[Document]:
        return [doc for doc in self.documents if doc.label is label]

    def statistics(self) -> Dict[str, Any]:
        return {
            "vocabulary_size": len(self.term_stats),
            "document_count": len(self.documents),
            "class1_documents": len(self.documents_of(ClassLabel.CLASS_1)),
            "class2_documents": len(self.documents_of(ClassLabel.CLASS_2)),
            "class1_total": self.class_totals.class1_total,
            "class2_total": self.class_totals.class2_total,
        }


__all__ = ["ClassTotals", "CorpusContext", "CorpusTermStats", "MIN_TF"]
