"""DeltaWeight Phase - Base Weighting Phase Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from concurrent.futures import Executor
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar
from deltaweight_core.index.corpus import CorpusContext

T = TypeVar("T")

class WeightingPhase(ABC):
    """Base class for one step of the weighting pipeline."""

    name: str = "phase"

    @abstractmethod
    def apply(self, context: CorpusContext, executor: Optional[Executor] = None) -> None:
        pass

    def explain(self, term: str, context: CorpusContext) -> Dict[str, Any]:
        return {"term": term, "description": self.name}

    @staticmethod
    def run_all(fn: Callable[[T], Any], items: Iterable[T], executor: Optional[Executor] = None) -> List[Any]:
        """Apply fn to every item and wait for all of them to finish."""
        if executor is None:
            return [fn(item) for item in items]
        return list(executor.map(fn, items))

__all__ = ["WeightingPhase"]
