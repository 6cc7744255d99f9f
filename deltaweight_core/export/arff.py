"""DeltaWeight ARFF Export - Weka Attribute-Relation Files.

Writes one REAL attribute per vocabulary term, in vocabulary order,
followed by the nominal class attribute and one data row per document.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import io
import logging
import math
from dataclasses import dataclass
from typing import TextIO, Tuple

from deltaweight_core.engine import WeightingResult
from deltaweight_core.export.vectors import DenseVectorizer
from deltaweight_core.index.document import ClassLabel

logger = logging.getLogger(__name__)


@dataclass
class ArffConfig:
    """ARFF output configuration.

    Attributes:
        relation: Relation name
        class_names: Nominal values for class 1 and class 2
    """

    relation: str = "tweets"
    class_names: Tuple[str, str] = ("pos", "neg")

    def __post_init__(self):
        if len(self.class_names) != 2:
            raise ValueError(f"Exactly two class names required, got {len(self.class_names)}")
        self.class_names = tuple(self.class_names)


# Characters that force a quoted ARFF name
_SPECIAL_CHARS = set(" \t\n\r,{}%'\"?")
_ESCAPES = {"\\": "\\\\", "'": "\\'", "\"": "\\\"", "%": "\\%", "\t": "\\t", "\n": "\\n", "\r": "\\r"}


def quote_name(name: str) -> str:
    """Single-quote an ARFF name when it holds separators or quotes."""
    if name and not any(ch in _SPECIAL_CHARS for ch in name):
        return name
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in name)
    return f"'{escaped}'"


def format_value(value: float) -> str:
    """Render a weight the way Weka reads non-finite doubles."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(float(value))


class ArffExporter:
    """Serializes a weighting result as ARFF."""

    def __init__(self, config: ArffConfig = None):
        self.config = config or ArffConfig()

    def class_name(self, label: ClassLabel) -> str:
        return self.config.class_names[0] if label is ClassLabel.CLASS_1 else self.config.class_names[1]

    def export(self, result: WeightingResult, stream: TextIO) -> int:
        """Write the result to a text stream.

        Returns:
            Number of data rows written
        """
        vocabulary = result.vocabulary
        vectorizer = DenseVectorizer(vocabulary)

        stream.write(f"@RELATION {quote_name(self.config.relation)}\n\n")
        for i in range(1, len(vocabulary) + 1):
            stream.write(f"@ATTRIBUTE a{i} REAL\n")
        stream.write(f"@ATTRIBUTE class {{{','.join(quote_name(n) for n in self.config.class_names)}}}\n\n")
        stream.write("\n@DATA\n")

        rows = 0
        for document in result.documents:
            vector = vectorizer.vector(document)
            values = "".join(f"{format_value(v)}," for v in vector)
            stream.write(f"{values}{quote_name(self.class_name(document.label))}\n")
            rows += 1

        logger.info(f"Exported {rows} rows with {len(vocabulary)} attributes")
        return rows

    def write(self, result: WeightingResult, path: str) -> int:
        """Write the result to a file."""
        with open(path, "w", encoding="utf-8") as f:
            return self.export(result, f)

    def to_string(self, result: WeightingResult) -> str:
        buffer = io.StringIO()
        self.export(result, buffer)
        return buffer.getvalue()


__all__ = ["ArffConfig", "ArffExporter", "format_value", "quote_name"]
