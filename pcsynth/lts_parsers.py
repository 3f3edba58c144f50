"""Readers for string-labelled transition systems in text and JSON form."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pcsynth.lts import LTS


def read_lts(path: str | os.PathLike[str]) -> LTS:
    """Read an LTS from a text file.

    The first line names the initial state; each further line is a
    transition ``start label end``, where ``end`` takes the rest of the line.
    """
    lts = LTS()
    text = Path(path).read_text(encoding="utf-8")
    for number, line in enumerate(text.splitlines()):
        if number == 0:
            lts.set_initial_state(line, True)
            continue
        start, _, rest = line.partition(" ")
        label, _, end = rest.partition(" ")
        lts.add_transition(start, label, end)
    return lts


def read_lts_json(path: str | os.PathLike[str]) -> LTS:
    """Read an LTS from a JSON file."""
    with open(path, encoding="utf-8") as stream:
        data = json.load(stream)
    return parse_lts_json(data)


def parse_lts_json(data: Mapping[str, Any]) -> LTS:
    """Build an LTS from an object with ``initialState`` and ``transitions``.

    Each transition holds ``startState``, ``label`` and ``endState``.
    """
    lts = LTS()
    lts.set_initial_state(data["initialState"], True)
    for transition in data["transitions"]:
        lts.add_transition(
            transition["startState"],
            transition["label"],
            transition["endState"],
            True,
        )
    return lts