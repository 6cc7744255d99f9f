"""DeltaWeight Core Engine - Weighting Pipeline Orchestration.

The DeltaTfIdfEngine runs the weighting pipeline over two labeled
collections of documents: occurrence aggregation, IDF, TF and the final
TF x IDF combination, strictly in that order.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import codecs
import logging
import math
import time
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Generator, Iterable, List, Optional, Union

from deltaweight_core.index.aggregator import OccurrenceAggregator
from deltaweight_core.index.corpus import CorpusContext
from deltaweight_core.index.document import ClassLabel, Document
from deltaweight_core.ranking.base import WeightingPhase
from deltaweight_core.ranking.combiner import WeightCombiner
from deltaweight_core.ranking.idf import IdfCalculator, IdfScheme
from deltaweight_core.ranking.tf import TfCalculator, TfScheme
from deltaweight_core.storage.source import FileLineSource, SourceConfig

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    """Pipeline state enumeration."""

    READY = auto()
    AGGREGATING = auto()
    WEIGHTING = auto()
    DONE = auto()
    ERROR = auto()


@dataclass
class WeightingConfig:
    """Weighting pipeline configuration.

    Attributes:
        tf_scheme: TF formula
        idf_scheme: IDF formula
        workers: Thread pool size for the IDF and TF phases (1 = sequential)
        encoding: Text encoding of file sources
    """

    tf_scheme: TfScheme = TfScheme.NATURAL
    idf_scheme: IdfScheme = IdfScheme.DELTA_SMOOTHED
    workers: int = 1
    encoding: str = "utf-8"

    def __post_init__(self):
        """Coerce scheme names and validate."""
        self.tf_scheme = TfScheme.parse(self.tf_scheme)
        self.idf_scheme = IdfScheme.parse(self.idf_scheme)
        if int(self.workers) < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        self.workers = int(self.workers)
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding {self.encoding!r}") from None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "tf_scheme": self.tf_scheme.value,
            "idf_scheme": self.idf_scheme.value,
            "workers": self.workers,
            "encoding": self.encoding,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeightingConfig":
        """Create from dictionary."""
        return cls(
            tf_scheme=data.get("tf_scheme", TfScheme.NATURAL),
            idf_scheme=data.get("idf_scheme", IdfScheme.DELTA_SMOOTHED),
            workers=data.get("workers", 1),
            encoding=data.get("encoding", "utf-8"),
        )


@dataclass
class WeightingResult:
    """Output of one pipeline run.

    Attributes:
        context: Corpus context with all computed statistics
        config: Configuration the run used
        took_ms: Pipeline time in milliseconds
    """

    context: CorpusContext
    config: WeightingConfig
    took_ms: float = 0.0
    phase_ms: Dict[str, float] = field(default_factory=dict)

    @property
    def vocabulary(self) -> List[str]:
        """Distinct terms in lexicographic (column) order."""
        return self.context.vocabulary

    @property
    def documents(self) -> List[Document]:
        return self.context.documents

    @property
    def labels(self) -> List[ClassLabel]:
        return [doc.label for doc in self.context.documents]

    def idf(self, term: str) -> Optional[float]:
        stats = self.context.stats(term)
        return stats.idf if stats else None

    def weights(self) -> List[Dict[str, float]]:
        """Term -> weight mapping of every document, in document order."""
        return [doc.weights() for doc in self.context.documents]

    def statistics(self) -> Dict[str, Any]:
        """Corpus counts plus counts of notable weights."""
        infinite = negative = nan = 0
        for doc in self.context.documents:
            for data in doc.term_data.values():
                value = data.tfidf
                if value is None:
                    continue
                if math.isnan(value):
                    nan += 1
                elif math.isinf(value):
                    infinite += 1
                if value < 0:
                    negative += 1
        return {
            **self.context.statistics(),
            **self.config.to_dict(),
            "infinite_weights": infinite,
            "negative_weights": negative,
            "nan_weights": nan,
            "took_ms": self.took_ms,
        }

    def __len__(self) -> int:
        return len(self.context.documents)

    def __iter__(self) -> Generator[Document, None, None]:
        yield from self.context.documents


class DeltaTfIdfEngine:
    """Main weighting engine.

    Each call to run() builds a fresh corpus context, so one engine can
    be reused for any number of independent runs.
    """

    def __init__(self, config: Optional[WeightingConfig] = None):
        """Initialize engine.

        Args:
            config: Pipeline configuration
        """
        self.config = config or WeightingConfig()
        self._state = PipelineState.READY
        self._aggregator = OccurrenceAggregator()
        self._run_count = 0

    def build_phases(self) -> List[WeightingPhase]:
        """Weighting phases in execution order."""
        return [
            IdfCalculator(self.config.idf_scheme),
            TfCalculator(self.config.tf_scheme),
            WeightCombiner(),
        ]

    def run(
        self,
        class1_lines: Optional[Iterable[str]],
        class2_lines: Optional[Iterable[str]],
    ) -> WeightingResult:
        """Run the full pipeline.

        Args:
            class1_lines: Document lines of class 1
            class2_lines: Document lines of class 2

        Returns:
            Weighting result

        Raises:
            SourceUnavailable: If either class cannot be read
            InternalConsistencyError: If a term has no IDF at combination
        """
        start = time.time()
        logger.info(
            f"Running weighting pipeline: tf={self.config.tf_scheme.value}, "
            f"idf={self.config.idf_scheme.value}"
        )

        try:
            self._state = PipelineState.AGGREGATING
            context = self._aggregator.aggregate(class1_lines, class2_lines)

            self._state = PipelineState.WEIGHTING
            phase_ms = self._run_phases(context)
        except Exception:
            self._state = PipelineState.ERROR
            raise

        self._state = PipelineState.DONE
        self._run_count += 1

        result = WeightingResult(
            context=context,
            config=self.config,
            took_ms=(time.time() - start) * 1000,
            phase_ms=phase_ms,
        )

        stats = result.statistics()
        if stats["infinite_weights"] or stats["nan_weights"]:
            logger.warning(
                f"{stats['infinite_weights']} infinite and {stats['nan_weights']} NaN weights "
                f"produced by {self.config.idf_scheme.value} IDF"
            )
        logger.info(f"Weighting complete in {result.took_ms:.1f}ms")
        return result

    def run_files(self, class1_path: str, class2_path: str) -> WeightingResult:
        """Run the pipeline over two files with one document per line."""
        source_config = SourceConfig(encoding=self.config.encoding)
        return self.run(
            FileLineSource(class1_path, source_config),
            FileLineSource(class2_path, source_config),
        )

    def _run_phases(self, context: CorpusContext) -> Dict[str, float]:
        timings: Dict[str, float] = {}
        executor: Optional[Executor] = None
        if self.config.workers > 1:
            executor = ThreadPoolExecutor(max_workers=self.config.workers)
        try:
            for phase in self.build_phases():
                phase_start = time.time()
                phase.apply(context, executor)
                timings[phase.name] = (time.time() - phase_start) * 1000
        finally:
            if executor is not None:
                executor.shutdown(wait=True)
        return timings

    @property
    def state(self) -> PipelineState:
        """Get current pipeline state."""
        return self._state

    def get_statistics(self) -> Dict[str, Any]:
        return {"runs": self._run_count, "state": self._state.name, **self.config.to_dict()}


def compute_weights(
    class1_lines: Iterable[str],
    class2_lines: Iterable[str],
    tf_scheme: Union[TfScheme, str] = TfScheme.NATURAL,
    idf_scheme: Union[IdfScheme, str] = IdfScheme.DELTA_SMOOTHED,
) -> WeightingResult:
    """Run the pipeline once with the given schemes."""
    config = WeightingConfig(tf_scheme=tf_scheme, idf_scheme=idf_scheme)
    return DeltaTfIdfEngine(config).run(class1_lines, class2_lines)


__all__ = [
    "DeltaTfIdfEngine",
    "PipelineState",
    "WeightingConfig",
    "WeightingResult",
    "compute_weights",
]
