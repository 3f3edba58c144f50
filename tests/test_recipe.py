import json

import pytest

from pcsynth.composite import CompositeOperation
from pcsynth.lts import LTS
from pcsynth.operations import Guard, Observable
from pcsynth.recipe import Recipe, parse_recipe_json, read_recipe_json

RECIPE1 = {
    "initialState": "A",
    "transitions": [
        {
            "startState": "A",
            "label": {
                "guard": {"name": "check", "input": ["c"]},
                "sequential": [
                    {"name": "load", "input": [], "output": ["f"]},
                    {"name": "separate", "input": ["f"], "output": ["p", "h"]},
                    {"name": "applyglue", "input": ["p"], "output": ["p"]},
                ],
                "parallel": [],
            },
            "endState": "B",
        },
        {
            "startState": "A",
            "label": {
                "guard": {},
                "sequential": [{"name": "rem", "input": ["h2"], "output": ["h2"]}],
                "parallel": [{"name": "store", "input": ["p0"], "output": []}],
            },
            "endState": "E",
        },
    ],
}


def _expected():
    expected = LTS()
    expected.set_initial_state("A", False)

    co1 = CompositeOperation()
    co1.guard = (Guard("check"), ["c"])
    co1.sequential.append((Observable("load"), [], ["f"]))
    co1.sequential.append((Observable("separate"), ["f"], ["p", "h"]))
    co1.sequential.append((Observable("applyglue"), ["p"], ["p"]))
    expected.add_transition("A", co1, "B", True)

    co2 = CompositeOperation()
    co2.sequential.append((Observable("rem"), ["h2"], ["h2"]))
    co2.parallel.append((Observable("store"), ["p0"], []))
    expected.add_transition("A", co2, "E", True)
    return expected


@pytest.fixture
def recipe_file(tmp_path):
    path = tmp_path / "recipe1.json"
    path.write_text(json.dumps(RECIPE1), encoding="utf-8")
    return path


def test_recipe1_from_file(recipe_file):
    assert read_recipe_json(recipe_file) == _expected()


def test_parse_recipe_json():
    got = parse_recipe_json(RECIPE1)
    assert got == _expected()
    assert got.num_of_transitions() == 2
    assert not got["A"].transitions[1].label.has_guard()


def test_recipe_class_loads(recipe_file):
    recipe = Recipe(recipe_file)
    assert recipe.lts == _expected()
    assert recipe.lts.initial_state == "A"


def test_recipe_set_recipe_replaces(recipe_file):
    recipe = Recipe()
    assert recipe.lts.num_of_states() == 0
    recipe.set_recipe(recipe_file)
    assert recipe.lts.num_of_states() == 3


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Recipe(tmp_path / "missing.json")


def test_missing_operation_name_raises():
    data = {
        "initialState": "A",
        "transitions": [
            {"startState": "A", "label": {"sequential": [{"input": []}]}, "endState": "B"}
        ],
    }
    with pytest.raises(KeyError):
        parse_recipe_json(data)