import math

import pytest

from deltaweight_core.errors import InternalConsistencyError
from deltaweight_core.ranking.combiner import WeightCombiner
from deltaweight_core.ranking.idf import IdfCalculator, IdfScheme
from deltaweight_core.ranking.tf import TfCalculator, TfScheme


def test_weight_is_tf_times_idf(movie_context):
    IdfCalculator(IdfScheme.DELTA).apply(movie_context)
    TfCalculator(TfScheme.NATURAL).apply(movie_context)
    WeightCombiner().apply(movie_context)

    first = movie_context.documents[0]
    assert first.weights()["movie"] == pytest.approx(0.5 * math.log10(2))
    assert first.weights()["good"] == -math.inf
    assert movie_context.documents[2].weights()["bad"] == math.inf


def test_missing_idf_is_internal_consistency_error(movie_context):
    TfCalculator(TfScheme.NATURAL).apply(movie_context)
    with pytest.raises(InternalConsistencyError) as excinfo:
        WeightCombiner().apply(movie_context)
    assert excinfo.value.term in movie_context.vocabulary


def test_explain(movie_context):
    IdfCalculator(IdfScheme.DELTA_SMOOTHED).apply(movie_context)
    TfCalculator(TfScheme.NATURAL).apply(movie_context)
    combiner = WeightCombiner()
    combiner.apply(movie_context)
    explanation = combiner.explain("movie", movie_context)
    assert set(explanation["details"]) == {0, 2}
    assert explanation["idf"] == movie_context.stats("movie").idf
