"""Recipes: transition systems labelled with composite operations."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

from pcsynth.composite import CompositeOperation
from pcsynth.lts import LTS
from pcsynth.operations import Guard, Observable


def _parse_tasks(tasks: Any) -> list[tuple[Observable, list[str], list[str]]]:
    return [
        (
            Observable(task["name"]),
            list(task.get("input") or []),
            list(task.get("output") or []),
        )
        for task in tasks or []
    ]


def parse_recipe_json(data: Mapping[str, Any]) -> LTS:
    """Build a recipe LTS from its JSON object form.

    Each transition's ``label`` may hold ``guard`` (``name``, ``input``),
    ``sequential`` and ``parallel`` lists of ``name``, ``input``, ``output``.
    """
    lts = LTS()
    lts.set_initial_state(data["initialState"], True)
    for transition in data["transitions"]:
        label = transition["label"]
        co = CompositeOperation()
        guard = label.get("guard")
        if guard:
            co.guard = (Guard(guard["name"]), list(guard.get("input") or []))
        co.sequential = _parse_tasks(label.get("sequential"))
        co.parallel = _parse_tasks(label.get("parallel"))
        lts.add_transition(transition["startState"], co, transition["endState"], True)
    return lts


def read_recipe_json(path: str | os.PathLike[str]) -> LTS:
    """Read a recipe LTS from a JSON file."""
    with open(path, encoding="utf-8") as stream:
        data = json.load(stream)
    return parse_recipe_json(data)


class Recipe:
    """A product recipe loaded from JSON."""

    def __init__(self, filepath: str | os.PathLike[str] | None = None) -> None:
        self._lts = LTS()
        if filepath is not None:
            self.set_recipe(filepath)

    @property
    def lts(self) -> LTS:
        """The recipe's transition system."""
        return self._lts

    def set_recipe(self, filepath: str | os.PathLike[str]) -> None:
        """Load the recipe from a JSON file."""
        self._lts = read_recipe_json(filepath)