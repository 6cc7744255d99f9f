"""DeltaWeight Dense Vectors - Fixed-Order Document Vectors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Sequence

import numpy as np

from deltaweight_core.index.document import Document

class DenseVectorizer:
    """Lays out document weights along a fixed vocabulary order.

    Terms missing from a document get weight 0.
    """

    def __init__(self, vocabulary: Sequence[str]):
        self.vocabulary = list(vocabulary)
        self.columns: Dict[str, int] = {term: i for i, term in enumerate(self.vocabulary)}

    @property
    def dimensions(self) -> int:
        return len(self.vocabulary)

    def vector(self, document: Document) -> np.ndarray:
        row = np.zeros(self.dimensions, dtype=np.float64)
        for term, data in document.term_data.items():
            row[self.columns[term]] = data.tfidf
        return row

    def transform(self, documents: Iterable[Document]) -> np.ndarray:
        """Stack document vectors into a (documents, vocabulary) matrix."""
        rows: List[np.ndarray] = [self.vector(doc) for doc in documents]
        if not rows:
            return np.zeros((0, self.dimensions), dtype=np.float64)
        return np.vstack(rows)

__all__ = ["DenseVectorizer"]
