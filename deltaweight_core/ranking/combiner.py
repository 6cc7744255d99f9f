"""DeltaWeight Weight Combiner.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
from concurrent.futures import Executor
from typing import Any, Dict, Optional
from deltaweight_core.errors import InternalConsistencyError
from deltaweight_core.index.corpus import CorpusContext
from deltaweight_core.index.document import Document
from deltaweight_core.ranking.base import WeightingPhase

logger = logging.getLogger(__name__)

class WeightCombiner(WeightingPhase):
    """Multiplies each document TF by the term's corpus IDF."""

    name = "combine"

    def apply(self, context: CorpusContext, executor: Optional[Executor] = None) -> None:
        def combine(document: Document) -> None:
            for term, data in document.term_data.items():
                stats = context.term_stats.get(term)
                if stats is None or stats.idf is None:
                    raise InternalConsistencyError(term)
                data.tfidf = data.tf * stats.idf

        self.run_all(combine, context.documents, executor)
        logger.debug(f"Combined weights for {len(context.documents)} documents")

    def explain(self, term: str, context: CorpusContext) -> Dict[str, Any]:
        stats = context.stats(term)
        idf = stats.idf if stats else None
        return {
            "term": term,
            "description": "weight = tf * idf",
            "idf": idf,
            "details": {
                doc.doc_id: doc.term_data[term].tfidf
                for doc in context.documents
                if term in doc.term_data
            },
        }

__all__ = ["WeightCombiner"]
