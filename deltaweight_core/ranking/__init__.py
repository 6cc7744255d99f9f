"""DeltaWeight Weighting Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from deltaweight_core.ranking.base import WeightingPhase
from deltaweight_core.ranking.idf import IdfCalculator, IdfScheme
from deltaweight_core.ranking.tf import MaxTfSnapshot, TfCalculator, TfScheme
from deltaweight_core.ranking.combiner import WeightCombiner

__all__ = ["WeightingPhase", "IdfCalculator", "IdfScheme", "MaxTfSnapshot", "TfCalculator", "TfScheme", "WeightCombiner"]
