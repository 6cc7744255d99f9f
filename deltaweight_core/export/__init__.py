"""DeltaWeight Export Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from deltaweight_core.export.vectors import DenseVectorizer
from deltaweight_core.export.arff import ArffConfig, ArffExporter, format_value, quote_name

__all__ = ["DenseVectorizer", "ArffConfig", "ArffExporter", "format_value", "quote_name"]
