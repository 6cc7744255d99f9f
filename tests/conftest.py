import pytest

from deltaweight_core.index.aggregator import OccurrenceAggregator


@pytest.fixture
def movie_lines():
    return ["good movie", "good film"], ["bad movie"]


@pytest.fixture
def movie_context(movie_lines):
    class1, class2 = movie_lines
    return OccurrenceAggregator().aggregate(class1, class2)


@pytest.fixture
def class_files(tmp_path, movie_lines):
    class1, class2 = movie_lines
    pos = tmp_path / "pos"
    neg = tmp_path / "neg"
    pos.write_text("\n".join(class1) + "\n", encoding="utf-8")
    neg.write_text("\n".join(class2) + "\n", encoding="utf-8")
    return str(pos), str(neg)
