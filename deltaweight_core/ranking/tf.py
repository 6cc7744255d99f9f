"""DeltaWeight TF Calculator - Term Frequency Formulas.

Natural, logarithmic and boolean TF are document-local. Augmented TF
normalizes each term by its maximum natural TF over the whole corpus and
therefore runs in two passes: natural TF and the max-TF snapshot first,
then the normalized values derived from that snapshot alone.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
import math
from concurrent.futures import Executor
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from deltaweight_core.index.corpus import CorpusContext, MIN_TF
from deltaweight_core.index.document import Document
from deltaweight_core.ranking.base import WeightingPhase

logger = logging.getLogger(__name__)

class TfScheme(Enum):
    """Supported TF formulas."""
    NATURAL = "natural"
    LOGARITHM = "logarithm"
    AUGMENTED = "augmented"
    BOOLEAN = "boolean"

    @classmethod
    def parse(cls, value: Any) -> "TfScheme":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown TF scheme {value!r} (expected one of: {choices})") from None

def natural_tf(occurrence: int, total: int) -> float:
    return occurrence / total

def logarithm_tf(occurrence: int, total: int) -> float:
    # No floor: rare terms in long documents go negative
    return 1.0 + math.log10(occurrence / total)

def boolean_tf(occurrence: int, total: int) -> float:
    return 1.0 if occurrence / total > 0 else 0.0

def augmented_tf(tf: float, max_tf: float) -> float:
    return 0.5 + (0.5 * tf) / max_tf

@dataclass(frozen=True)
class MaxTfSnapshot:
    """Per-term maximum natural TF over all documents, read-only."""
    values: Mapping[str, float]

    @classmethod
    def from_documents(cls, documents: Iterable[Document]) -> "MaxTfSnapshot":
        max_tf: Dict[str, float] = {}
        for document in documents:
            for term, data in document.term_data.items():
                max_tf[term] = max(data.tf, max_tf.get(term, MIN_TF))
        return cls(values=MappingProxyType(max_tf))

    def __getitem__(self, term: str) -> float:
        return self.values[term]

    def __contains__(self, term: object) -> bool:
        return term in self.values

    def __len__(self) -> int:
        return len(self.values)

_LOCAL_FORMULAS = {
    TfScheme.NATURAL: natural_tf,
    TfScheme.LOGARITHM: logarithm_tf,
    TfScheme.BOOLEAN: boolean_tf,
    # Pass 1 of augmented is natural TF
    TfScheme.AUGMENTED: natural_tf,
}

class TfCalculator(WeightingPhase):
    """Computes TF for every (document, term) pair."""

    name = "tf"

    def __init__(self, scheme: TfScheme = TfScheme.NATURAL):
        self.scheme = TfScheme.parse(scheme)
        self._formula = _LOCAL_FORMULAS[self.scheme]
        self.snapshot: Optional[MaxTfSnapshot] = None

    def _local_pass(self, document: Document) -> None:
        for data in document.term_data.values():
            data.tf = self._formula(data.occurrence, document.total)

    def _normalize_pass(self, document: Document) -> None:
        snapshot = self.snapshot
        for term, data in document.term_data.items():
            data.tf = augmented_tf(data.tf, snapshot[term])

    def apply(self, context: CorpusContext, executor: Optional[Executor] = None) -> None:
        self.run_all(self._local_pass, context.documents, executor)

        if self.scheme is TfScheme.AUGMENTED:
            # run_all returned, so every document holds its natural TF
            self.snapshot = MaxTfSnapshot.from_documents(context.documents)
            for term, value in self.snapshot.values.items():
                stats = context.term_stats[term]
                stats.max_tf = max(stats.max_tf, value)
            self.run_all(self._normalize_pass, context.documents, executor)

        logger.debug(f"Computed {self.scheme.value} TF for {len(context.documents)} documents")

    def explain(self, term: str, context: CorpusContext) -> Dict[str, Any]:
        documents = [doc for doc in context.documents if term in doc.term_data]
        details: Dict[str, Any] = {
            "documents": {doc.doc_id: doc.term_data[term].tf for doc in documents},
        }
        if self.scheme is TfScheme.AUGMENTED and self.snapshot is not None and term in self.snapshot:
            details["max_tf"] = self.snapshot[term]
        return {"term": term, "description": f"TF[{self.scheme.value}]", "details": details}

__all__ = [
    "MaxTfSnapshot",
    "TfCalculator",
    "TfScheme",
    "augmented_tf",
    "boolean_tf",
    "logarithm_tf",
    "natural_tf",
]
