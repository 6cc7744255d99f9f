"""DeltaWeight IDF Calculator - Inverse Class Frequency Formulas.

Implements the plain IDF formulas (normal, probabilistic, BM25) and the
Delta variants that compare a term's occurrence between the two classes.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
from concurrent.futures import Executor
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np

from deltaweight_core.index.corpus import ClassTotals, CorpusContext, CorpusTermStats
from deltaweight_core.ranking.base import WeightingPhase

logger = logging.getLogger(__name__)

class IdfScheme(Enum):
    """Supported IDF formulas."""
    NORMAL_IDF = "normal_idf"
    PROB = "prob"
    BM25 = "bm25"
    DELTA = "delta"  # Unsmoothed, yields -inf and +inf
    DELTA_SMOOTHED = "delta_smoothed"
    DELTA_PROB = "delta_prob"  # Unsmoothed, yields -inf and +inf
    DELTA_PROB_SMOOTHED = "delta_prob_smoothed"

    @classmethod
    def parse(cls, value: Any) -> "IdfScheme":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown IDF scheme {value!r} (expected one of: {choices})") from None

    @property
    def smoothed(self) -> bool:
        return self in (IdfScheme.DELTA_SMOOTHED, IdfScheme.DELTA_PROB_SMOOTHED)

Ratio = Tuple[float, float]

def _normal_idf(c1: float, c2: float, n1: float, n2: float) -> Ratio:
    return c1 + c2, n1 + n2

def _prob(c1: float, c2: float, n1: float, n2: float) -> Ratio:
    denominator = n1 + n2
    return (c1 + c2) - denominator, denominator

def _bm25(c1: float, c2: float, n1: float, n2: float) -> Ratio:
    denominator = 0.5 + n1 + n2
    return 1.0 + (c1 + c2) - denominator, denominator

def _delta(c1: float, c2: float, n1: float, n2: float) -> Ratio:
    return c1 * n2, c2 * n1

def _delta_smoothed(c1: float, c2: float, n1: float, n2: float) -> Ratio:
    return c1 * n2 + 0.5, c2 * n1 + 0.5

def _delta_prob(c1: float, c2: float, n1: float, n2: float) -> Ratio:
    return (c1 - n1) * n2, (c2 - n2) * n1

def _delta_prob_smoothed(c1: float, c2: float, n1: float, n2: float) -> Ratio:
    return (c1 - n1) * n2 + 0.5, (c2 - n2) * n1 + 0.5

IDF_FORMULAS: Dict[IdfScheme, Callable[[float, float, float, float], Ratio]] = {
    IdfScheme.NORMAL_IDF: _normal_idf,
    IdfScheme.PROB: _prob,
    IdfScheme.BM25: _bm25,
    IdfScheme.DELTA: _delta,
    IdfScheme.DELTA_SMOOTHED: _delta_smoothed,
    IdfScheme.DELTA_PROB: _delta_prob,
    IdfScheme.DELTA_PROB_SMOOTHED: _delta_prob_smoothed,
}

def log10_ratio(numerator: float, denominator: float) -> float:
    """log10(numerator / denominator) with IEEE semantics.

    x/0 is a signed infinity, 0/0 is NaN and log10(0) is -inf.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log10(np.float64(numerator) / np.float64(denominator)))

class IdfCalculator(WeightingPhase):
    """Computes one IDF value per vocabulary term."""

    name = "idf"

    def __init__(self, scheme: IdfScheme = IdfScheme.DELTA_SMOOTHED):
        self.scheme = IdfScheme.parse(scheme)
        self._formula = IDF_FORMULAS[self.scheme]

    def ratio(self, stats: CorpusTermStats, totals: ClassTotals) -> Ratio:
        """Numerator and denominator of the IDF fraction for one term."""
        return self._formula(
            float(totals.class1_total),
            float(totals.class2_total),
            float(stats.corpus1_occurrence),
            float(stats.corpus2_occurrence),
        )

    def idf(self, stats: CorpusTermStats, totals: ClassTotals) -> float:
        numerator, denominator = self.ratio(stats, totals)
        return log10_ratio(numerator, denominator)

    def apply(self, context: CorpusContext, executor: Optional[Executor] = None) -> None:
        totals = context.class_totals

        def assign(stats: CorpusTermStats) -> None:
            stats.idf = self.idf(stats, totals)

        self.run_all(assign, list(context.term_stats.values()), executor)
        logger.debug(f"Computed {self.scheme.value} IDF for {len(context.term_stats)} terms")

    def explain(self, term: str, context: CorpusContext) -> Dict[str, Any]:
        stats = context.stats(term)
        if stats is None:
            raise KeyError(term)
        numerator, denominator = self.ratio(stats, context.class_totals)
        return {
            "term": term,
            "description": f"IDF[{self.scheme.value}] = log10({numerator} / {denominator})",
            "idf": log10_ratio(numerator, denominator),
            "details": {
                "numerator": numerator,
                "denominator": denominator,
                "corpus1_occurrence": stats.corpus1_occurrence,
                "corpus2_occurrence": stats.corpus2_occurrence,
                "class1_total": context.class_totals.class1_total,
                "class2_total": context.class_totals.class2_total,
            },
        }

__all__ = ["IdfCalculator", "IdfScheme", "IDF_FORMULAS", "log10_ratio"]
