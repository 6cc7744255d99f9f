import math

import numpy as np
import pytest

from deltaweight_core.engine import compute_weights
from deltaweight_core.export.arff import ArffConfig, ArffExporter, format_value, quote_name
from deltaweight_core.export.vectors import DenseVectorizer


def test_dense_vectors_follow_vocabulary(movie_lines):
    result = compute_weights(*movie_lines, idf_scheme="delta")
    matrix = DenseVectorizer(result.vocabulary).transform(result.documents)

    assert matrix.shape == (3, 4)
    # columns: bad, film, good, movie
    assert matrix[0, 0] == 0.0
    assert matrix[0, 1] == 0.0
    assert matrix[0, 2] == -np.inf
    assert matrix[0, 3] == pytest.approx(0.5 * math.log10(2))
    assert matrix[2, 0] == np.inf


def test_dense_vectors_empty():
    matrix = DenseVectorizer(["a", "b"]).transform([])
    assert matrix.shape == (0, 2)


def test_format_value():
    assert format_value(0.0) == "0.0"
    assert format_value(math.inf) == "Infinity"
    assert format_value(-math.inf) == "-Infinity"
    assert format_value(math.nan) == "NaN"
    assert format_value(0.25) == "0.25"


def test_arff_layout(movie_lines):
    result = compute_weights(*movie_lines, tf_scheme="augmented", idf_scheme="delta_smoothed")
    text = ArffExporter().to_string(result)
    lines = text.split("\n")

    assert lines[0] == "@RELATION tweets"
    attributes = [line for line in lines if line.startswith("@ATTRIBUTE a")]
    assert attributes == [f"@ATTRIBUTE a{i} REAL" for i in range(1, 5)]
    assert "@ATTRIBUTE class {pos,neg}" in lines

    data = lines[lines.index("@DATA") + 1:]
    rows = [row for row in data if row]
    assert len(rows) == 3
    assert [row.rsplit(",", 1)[1] for row in rows] == ["pos", "pos", "neg"]
    assert all(len(row.split(",")) == 5 for row in rows)


def test_arff_infinite_values(movie_lines):
    result = compute_weights(*movie_lines, idf_scheme="delta")
    rows = ArffExporter().to_string(result).strip().split("\n")[-3:]
    assert rows[0].startswith("0.0,0.0,-Infinity,")
    assert rows[2].startswith("Infinity,")


def test_arff_custom_names(tmp_path, movie_lines):
    result = compute_weights(*movie_lines)
    exporter = ArffExporter(ArffConfig(relation="reviews", class_names=("up", "down")))
    path = tmp_path / "out.arff"
    assert exporter.write(result, str(path)) == 3

    text = path.read_text(encoding="utf-8")
    assert text.startswith("@RELATION reviews\n")
    assert "@ATTRIBUTE class {up,down}" in text
    assert text.rstrip().endswith("down")


def test_arff_config_needs_two_classes():
    with pytest.raises(ValueError):
        ArffConfig(class_names=("a", "b", "c"))


def test_quote_name():
    assert quote_name("pos") == "pos"
    assert quote_name("movie reviews") == "'movie reviews'"
    assert quote_name("b,ad") == "'b,ad'"
    assert quote_name("it's") == "'it\\'s'"
    assert quote_name("50%") == "'50\\%'"
    assert quote_name("") == "''"


def test_arff_quotes_names_with_separators(movie_lines):
    result = compute_weights(*movie_lines)
    config = ArffConfig(relation="movie reviews", class_names=("very good", "b,ad"))
    lines = ArffExporter(config).to_string(result).split("\n")

    assert lines[0] == "@RELATION 'movie reviews'"
    assert "@ATTRIBUTE class {'very good','b,ad'}" in lines
    rows = [row for row in lines[lines.index("@DATA") + 1:] if row]
    assert rows[0].endswith(",'very good'")
    assert rows[2].endswith(",'b,ad'")
