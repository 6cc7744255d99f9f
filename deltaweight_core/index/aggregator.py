"""DeltaWeight Occurrence Aggregator - Corpus and Document Counting.

Scans the tokenized lines of both classes and builds the corpus context:
per-term class counts, per-document term counts and token totals.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from deltaweight_core.errors import SourceUnavailable
from deltaweight_core.index.corpus import ClassTotals, CorpusContext, CorpusTermStats
from deltaweight_core.index.document import ClassLabel, Document

logger = logging.getLogger(__name__)


class OccurrenceAggregator:
    """Builds a CorpusContext from the lines of two classes.

    Each line is one document; terms are its whitespace-delimited
    substrings. Empty lines produce no document.
    """

    def aggregate(
        self,
        class1_lines: Optional[Iterable[str]],
        class2_lines: Optional[Iterable[str]],
    ) -> CorpusContext:
        """Aggregate occurrence statistics.

        Args:
            class1_lines: Lines of class 1, in input order
            class2_lines: Lines of class 2, in input order

        Returns:
            A fresh corpus context

        Raises:
            SourceUnavailable: If a source is missing or fails while read
        """
        if class1_lines is None:
            raise SourceUnavailable("class 1", "no source given")
        if class2_lines is None:
            raise SourceUnavailable("class 2", "no source given")

        term_stats: Dict[str, CorpusTermStats] = {}
        documents: List[Document] = []

        class1_total = self._scan(class1_lines, ClassLabel.CLASS_1, term_stats, documents)
        class2_total = self._scan(class2_lines, ClassLabel.CLASS_2, term_stats, documents)

        context = CorpusContext(
            term_stats=term_stats,
            class_totals=ClassTotals(class1_total=class1_total, class2_total=class2_total),
            documents=documents,
        )
        logger.info(
            f"Aggregated {len(documents)} documents, {len(term_stats)} terms "
            f"(class totals {class1_total}/{class2_total})"
        )
        return context

    def _scan(
        self,
        lines: Iterable[str],
        label: ClassLabel,
        term_stats: Dict[str, CorpusTermStats],
        documents: List[Document],
    ) -> int:
        """Scan the lines of one class and return its token total."""
        class_total = 0
        try:
            for line in lines:
                terms = line.split()
                if not terms:
                    continue

                document = Document(doc_id=len(documents), label=label)
                documents.append(document)

                for term in terms:
                    stats = term_stats.get(term)
                    if stats is None:
                        stats = CorpusTermStats()
                        term_stats[term] = stats
                    stats.increment(label)
                    document.add_term(term)
                    class_total += 1
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(f"class {label.value}", str(e)) from e

        logger.debug(f"Class {label.value}: {class_total} tokens")
        return class_total


def aggregate_lines(
    class1_lines: Iterable[str],
    class2_lines: Iterable[str],
) -> CorpusContext:
    """Aggregate two classes of lines with a default aggregator."""
    return OccurrenceAggregator().aggregate(class1_lines, class2_lines)


__all__ = ["OccurrenceAggregator", "aggregate_lines"]
