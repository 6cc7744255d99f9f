"""DeltaWeight Errors - Pipeline Failure Types.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Optional


class DeltaWeightError(Exception):
    """Base class for weighting pipeline errors."""


class SourceUnavailable(DeltaWeightError):
    """Input lines for a class could not be obtained.

    Fatal for the whole run: aggregation never returns a partial corpus.
    """

    def __init__(self, source: str, reason: Optional[str] = None):
        self.source = source
        self.reason = reason
        message = f"Source unavailable: {source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InternalConsistencyError(DeltaWeightError):
    """A term reached weight combination without an IDF value."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"No IDF computed for term {term!r}")


__all__ = ["DeltaWeightError", "SourceUnavailable", "InternalConsistencyError"]
