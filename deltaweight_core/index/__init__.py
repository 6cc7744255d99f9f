"""DeltaWeight Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

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
from deltaweight_core.index.aggregator import OccurrenceAggregator, aggregate_lines

__all__ = [
    "ClassLabel",
    "Document",
    "DocumentTermWeight",
    "ClassTotals",
    "CorpusContext",
    "CorpusTermStats",
    "OccurrenceAggregator",
    "aggregate_lines",
]
