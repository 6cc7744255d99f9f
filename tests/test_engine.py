import math

import pytest

from deltaweight_core.engine import (
    DeltaTfIdfEngine,
    PipelineState,
    WeightingConfig,
    compute_weights,
)
from deltaweight_core.errors import SourceUnavailable
from deltaweight_core.index.document import ClassLabel
from deltaweight_core.ranking.idf import IdfScheme
from deltaweight_core.ranking.tf import TfScheme

CLASS1 = ["what a great great film", "loved the cast", "great fun"]
CLASS2 = ["what a dull film", "hated the cast", "dull dull plot"]


def test_config_defaults():
    config = WeightingConfig()
    assert config.tf_scheme is TfScheme.NATURAL
    assert config.idf_scheme is IdfScheme.DELTA_SMOOTHED
    assert config.workers == 1


def test_config_coerces_names():
    config = WeightingConfig(tf_scheme="augmented", idf_scheme="bm25")
    assert config.tf_scheme is TfScheme.AUGMENTED
    assert config.idf_scheme is IdfScheme.BM25


def test_config_rejects_invalid_values():
    with pytest.raises(ValueError):
        WeightingConfig(tf_scheme="nope")
    with pytest.raises(ValueError):
        WeightingConfig(idf_scheme="nope")
    with pytest.raises(ValueError):
        WeightingConfig(workers=0)


def test_config_dict_round_trip():
    config = WeightingConfig(tf_scheme="boolean", idf_scheme="delta_prob", workers=3)
    assert WeightingConfig.from_dict(config.to_dict()) == config


def test_movie_scenario(movie_lines):
    result = compute_weights(*movie_lines, tf_scheme="natural", idf_scheme="delta")

    assert result.vocabulary == ["bad", "film", "good", "movie"]
    assert result.labels == [ClassLabel.CLASS_1, ClassLabel.CLASS_1, ClassLabel.CLASS_2]
    assert result.idf("movie") == pytest.approx(0.30103, abs=1e-5)
    assert result.idf("missing") is None

    first = result.documents[0].weights()
    assert list(first) == ["good", "movie"]
    assert first["movie"] == pytest.approx(0.1505, abs=1e-4)
    assert first["good"] == -math.inf
    assert result.documents[0].tf("good") == 0.5


def test_empty_lines_produce_no_documents():
    result = compute_weights(["good movie", ""], ["", "bad movie"])
    assert len(result) == 2
    assert result.context.class_totals.class1_total == 2


def test_runs_are_identical():
    engine = DeltaTfIdfEngine(WeightingConfig(tf_scheme="augmented", idf_scheme="delta"))
    first = engine.run(CLASS1, CLASS2)
    second = engine.run(CLASS1, CLASS2)
    assert first.weights() == second.weights()
    assert engine.get_statistics()["runs"] == 2


@pytest.mark.parametrize("tf_scheme", list(TfScheme))
@pytest.mark.parametrize("idf_scheme", [IdfScheme.DELTA_SMOOTHED, IdfScheme.BM25])
def test_workers_match_sequential(tf_scheme, idf_scheme):
    sequential = DeltaTfIdfEngine(WeightingConfig(tf_scheme=tf_scheme, idf_scheme=idf_scheme))
    threaded = DeltaTfIdfEngine(WeightingConfig(tf_scheme=tf_scheme, idf_scheme=idf_scheme, workers=4))
    assert threaded.run(CLASS1, CLASS2).weights() == sequential.run(CLASS1, CLASS2).weights()


def test_statistics_count_notable_weights(movie_lines):
    result = compute_weights(*movie_lines, idf_scheme="delta")
    stats = result.statistics()
    # good twice, film and bad
    assert stats["infinite_weights"] == 4
    assert stats["negative_weights"] == 3
    assert stats["nan_weights"] == 0
    assert stats["idf_scheme"] == "delta"
    assert set(result.phase_ms) == {"idf", "tf", "combine"}


def test_smoothed_run_has_no_infinite_weights(movie_lines):
    stats = compute_weights(*movie_lines).statistics()
    assert stats["infinite_weights"] == 0


def test_infinite_weights_are_logged(movie_lines, caplog):
    with caplog.at_level("WARNING", logger="deltaweight_core.engine"):
        compute_weights(*movie_lines, idf_scheme="delta")
    assert "infinite" in caplog.text


def test_state_transitions(movie_lines):
    engine = DeltaTfIdfEngine()
    assert engine.state is PipelineState.READY
    engine.run(*movie_lines)
    assert engine.state is PipelineState.DONE

    with pytest.raises(SourceUnavailable):
        engine.run(None, movie_lines[1])
    assert engine.state is PipelineState.ERROR


def test_run_files(class_files):
    result = DeltaTfIdfEngine(WeightingConfig(idf_scheme="delta")).run_files(*class_files)
    assert len(result) == 3
    assert result.documents[0].weights()["movie"] == pytest.approx(0.5 * math.log10(2))


def test_run_files_missing_file(tmp_path, class_files):
    with pytest.raises(SourceUnavailable):
        DeltaTfIdfEngine().run_files(class_files[0], str(tmp_path / "absent"))


def test_config_rejects_unknown_encoding():
    with pytest.raises(ValueError):
        WeightingConfig(encoding="no-such-codec")
    assert WeightingConfig(encoding="latin-1").encoding == "latin-1"
