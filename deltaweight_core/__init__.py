"""DeltaWeight - Delta TF-IDF Weighting for Two-Class Corpora.

Turns two labeled collections of tokenized documents into per-document
term weight vectors, using plain TF-IDF schemes and the Delta variants
that weight a term by how differently it occurs in the two classes.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                           DeltaTfIdf Engine                                 │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Weighting Pipeline                           │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │ Aggregate  │→ │    IDF     │→ │     TF     │→ │  Combine   │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Corpus Context                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                     │   │
│   │  │ Term Stats │  │   Class    │  │ Documents  │                     │   │
│   │  │            │  │   Totals   │  │            │                     │   │
│   │  └────────────┘  └────────────┘  └────────────┘                     │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Input / Export                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                     │   │
│   │  │   Line     │  │   Dense    │  │    ARFF    │                     │   │
│   │  │  Sources   │  │  Vectors   │  │  Exporter  │                     │   │
│   │  └────────────┘  └────────────┘  └────────────┘                     │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Weighting schemes:
- TF: natural, logarithm, augmented (two-pass), boolean
- IDF: normal_idf, prob, bm25, delta, delta_smoothed, delta_prob,
  delta_prob_smoothed

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from deltaweight_core.engine import (
    DeltaTfIdfEngine,
    PipelineState,
    WeightingConfig,
    WeightingResult,
    compute_weights,
)

# Errors
from deltaweight_core.errors import (
    DeltaWeightError,
    InternalConsistencyError,
    SourceUnavailable,
)

# Corpus components
from deltaweight_core.index.document import (
    ClassLabel,
    Document,
    DocumentTermWeight,
)
from deltaweight_core.index.corpus import (
    ClassTotals,
    CorpusContext,
    CorpusTermStats,
)
from deltaweight_core.index.aggregator import OccurrenceAggregator

# Weighting
from deltaweight_core.ranking.base import WeightingPhase
from deltaweight_core.ranking.idf import IdfCalculator, IdfScheme
from deltaweight_core.ranking.tf import MaxTfSnapshot, TfCalculator, TfScheme
from deltaweight_core.ranking.combiner import WeightCombiner

# Input
from deltaweight_core.storage.source import (
    FileLineSource,
    LineSource,
    MemoryLineSource,
    SourceConfig,
)

# Export
from deltaweight_core.export.vectors import DenseVectorizer
from deltaweight_core.export.arff import ArffConfig, ArffExporter

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "DeltaTfIdfEngine",
    "PipelineState",
    "WeightingConfig",
    "WeightingResult",
    "compute_weights",
    # Errors
    "DeltaWeightError",
    "InternalConsistencyError",
    "SourceUnavailable",
    # Corpus
    "ClassLabel",
    "Document",
    "DocumentTermWeight",
    "ClassTotals",
    "CorpusContext",
    "CorpusTermStats",
    "OccurrenceAggregator",
    # Weighting
    "WeightingPhase",
    "IdfCalculator",
    "IdfScheme",
    "MaxTfSnapshot",
    "TfCalculator",
    "TfScheme",
    "WeightCombiner",
    # Input
    "FileLineSource",
    "LineSource",
    "MemoryLineSource",
    "SourceConfig",
    # Export
    "DenseVectorizer",
    "ArffConfig",
    "ArffExporter",
]
