"""Small worked examples of merging resources and synthesising controllers."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pcsynth.controller import Controller
from pcsynth.environment import Environment, export_environment
from pcsynth.lts import LTS
from pcsynth.lts_parsers import read_lts
from pcsynth.recipe import Recipe
from pcsynth.topology import CompleteTopology
from pcsynth.writers import describe_lts, export_to_file

DEFAULT_LTS_PATHS = ("../../data/lts/lts1.txt", "../../data/lts/lts2.txt")


def merge_example(
    number: int = 2,
    lts_paths: Sequence[str | os.PathLike[str]] | None = None,
    export_dir: str | os.PathLike[str] = "../../exports/merge",
    stream: TextIO | None = None,
) -> LTS:
    """Merge ``number`` resources into their complete topology and report on it.

    Odd-numbered resources are read from the first of ``lts_paths`` and
    even-numbered ones from the second. Each resource and the combined system
    are described on ``stream`` and exported to ``export_dir``. Returns the
    combined system. Raises ValueError when fewer than two are asked for.
    """
    if number < 2:
        raise ValueError("merge_example needs at least two resources")
    odd_path, even_path = DEFAULT_LTS_PATHS if lts_paths is None else lts_paths
    out = sys.stdout if stream is None else stream

    ltss = [read_lts(even_path if i % 2 == 0 else odd_path) for i in range(1, number + 1)]
    combined = CompleteTopology(ltss).lts

    for i, lts in enumerate(ltss, start=1):
        out.write(f"Labelled Transition System {i}:\n{describe_lts(lts)}\n")
    out.write(f"Combined LTS: \n{describe_lts(combined)}\n")

    out.write(f"[Merge Example] Number of Resources = {len(ltss)}\n")
    for i in (0, 1):
        out.write(
            f"[Merge Example: LTS-{i + 1}] Number of States = {ltss[i].num_of_states()}. "
            f"Number of Transitions = {ltss[i].num_of_transitions()}\n"
        )
    out.write(
        f"[Merge Example: Topology] Number of States = {combined.num_of_states()}. "
        f"Number of Transitions = {combined.num_of_transitions()}\n"
    )

    folder = Path(export_dir)
    for i, lts in enumerate(ltss, start=1):
        export_to_file(lts, folder / f"lts{i}.txt")
    export_to_file(combined, folder / "combined-lts.txt")
    return combined


def experimental(
    data_dir: str | os.PathLike[str] = "../../data/pad",
    export_dir: str | os.PathLike[str] = "../../exports/experimental",
) -> LTS:
    """Synthesise a controller for two resources and a small recipe.

    Reads ``recipe_s.json``, ``Resource1.txt`` and ``Resource5.txt`` from
    ``data_dir`` and exports the recipe, machine and controller. Returns the
    controller.
    """
    data = Path(data_dir)
    out = Path(export_dir)

    recipe = Recipe(data / "recipe_s.json")
    export_to_file(recipe.lts, out / "recipe.txt")

    machine = Environment()
    machine.load_resource(data / "Resource1.txt", False)
    machine.load_resource(data / "Resource5.txt", False)
    machine.complete()
    export_environment(machine, out)

    controller = Controller(machine, machine.topology, recipe).generate()
    export_to_file(controller, out / "controller.txt")
    return controller


def experimental2(export_dir: str | os.PathLike[str] = "../../exports/experimental/2") -> LTS:
    """Export a one-transition system labelled with a resource-indexed operation."""
    lts = LTS()
    lts.add_transition("s0", (2, "x"), "s1")
    export_to_file(lts, Path(export_dir) / "lts.txt")
    return lts