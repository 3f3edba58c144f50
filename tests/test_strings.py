import pytest

from pcsynth.strings import string_to_vector, vector_to_string


def test_vector_to_string_joins_with_commas():
    assert vector_to_string(["s0", "s1"]) == "s0,s1"


def test_vector_to_string_of_empty_is_empty():
    assert vector_to_string([]) == ""


def test_string_to_vector_of_empty_is_empty():
    assert string_to_vector("") == []


def test_trailing_delimiter_is_dropped():
    assert string_to_vector("a,b,") == ["a", "b"]


@pytest.mark.parametrize(
    "parts",
    [["s0"], ["s0", "s1", "s2"], ["a", "", "b"], ["", "x"]],
)
def test_round_trip(parts):
    assert string_to_vector(vector_to_string(parts)) == parts


def test_custom_delimiter_matches_default_split():
    assert string_to_vector("x;y;z", ";") == string_to_vector("x,y,z")


def test_other_delimiter_is_not_split_by_default():
    result = string_to_vector("x;y")
    assert len(result) == 1
    assert vector_to_string(result) == "x;y"