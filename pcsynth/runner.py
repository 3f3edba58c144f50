"""Run a complete synthesis example from a data folder and export the results."""

from __future__ import annotations

import argparse
import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

from pcsynth.controller import Controller
from pcsynth.environment import Environment, export_environment
from pcsynth.highlighter import highlight_topology
from pcsynth.lts import LTS
from pcsynth.recipe import Recipe
from pcsynth.writers import export_to_file

logger = logging.getLogger(__name__)

DEFAULT_DATA_ROOT = "../../data"
DEFAULT_EXPORT_ROOT = "../../exports"


@dataclass(frozen=True)
class RunnerOpts:
    """Options controlling how an example is run."""

    incremental_topology: bool = True
    generate_images: bool = True
    # Render only the highlighted topology rather than both topology images.
    only_highlighted_topology_image: bool = True


def num_of_resources(data_folder: str | os.PathLike[str]) -> int:
    """Count the entries in ``data_folder`` whose name contains "resource"."""
    return sum(1 for entry in Path(data_folder).iterdir() if "resource" in entry.name.lower())


def load_recipe(data_folder: str | os.PathLike[str]) -> Recipe:
    """Load ``recipe.json`` from ``data_folder``."""
    return Recipe(Path(data_folder) / "recipe.json")


def load_machine(data_folder: str | os.PathLike[str], count: int) -> Environment:
    """Load ``Resource1.txt`` to ``Resource<count>.txt`` from ``data_folder``."""
    machine = Environment()
    folder = Path(data_folder)
    for number in range(1, count + 1):
        machine.load_resource(folder / f"Resource{number}.txt", False)
    return machine


def _log_topology_stats(machine: Environment) -> None:
    lts = machine.topology.lts
    logger.info(
        "[Topology] Number Of States = %s, Number of Transitions = %s",
        lts.num_of_states(),
        lts.num_of_transitions(),
    )


def graphviz_save(
    export_folder: str | os.PathLike[str], count: int, only_highlighted_topology: bool
) -> None:
    """Render the exported GraphViz files in ``export_folder`` to PNG with ``dot``."""
    names = ["recipe", *(f"Resource{number}" for number in range(1, count + 1))]
    names += ["controller", "highlighted_topology"]
    if not only_highlighted_topology:
        names.append("topology")
    for name in names:
        command = ["dot", "-Tpng", f"{name}.txt", "-o", f"{name}.png"]
        try:
            subprocess.run(command, cwd=export_folder, check=False)
        except FileNotFoundError:
            logger.warning("GraphViz 'dot' was not found; no images generated")
            return


def run(
    name: str,
    opts: RunnerOpts | None = None,
    data_root: str | os.PathLike[str] = DEFAULT_DATA_ROOT,
    export_root: str | os.PathLike[str] = DEFAULT_EXPORT_ROOT,
) -> LTS:
    """Synthesise a controller for the example ``name`` and export everything.

    Resources are read from ``<data_root>/<name>/ResourceN.txt`` and the recipe
    from ``recipe.json``; results go to ``<export_root>/<name>/incremental`` or
    ``/complete``. Returns the generated controller.
    """
    opts = RunnerOpts() if opts is None else opts
    logger.info("Using %s Example", name)
    data_folder = Path(data_root) / name
    export_folder = Path(export_root) / name / (
        "incremental" if opts.incremental_topology else "complete"
    )
    count = num_of_resources(data_folder)

    recipe = load_recipe(data_folder)
    export_to_file(recipe.lts, export_folder / "recipe.txt")

    machine = load_machine(data_folder, count)
    if opts.incremental_topology:
        machine.incremental()
    else:
        machine.complete()
        _log_topology_stats(machine)

    controller = Controller(machine, machine.topology, recipe)
    controller_lts = controller.generate()
    export_to_file(controller_lts, export_folder / "controller.txt")
    highlight_topology(
        machine.topology.lts, controller_lts, export_folder / "highlighted_topology.txt"
    )

    export_environment(machine, export_folder)
    if opts.incremental_topology:
        _log_topology_stats(machine)
    if opts.generate_images:
        graphviz_save(export_folder, count, opts.only_highlighted_topology_image)
    return controller_lts


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Synthesise a controller for an example.")
    parser.add_argument("name", nargs="?", default="hinge", help="example folder name")
    parser.add_argument("--complete", action="store_true", help="compute the complete topology")
    parser.add_argument("--no-images", action="store_true", help="do not run GraphViz")
    parser.add_argument(
        "--all-images", action="store_true", help="also render the plain topology image"
    )
    parser.add_argument("--data-root", default=DEFAULT_DATA_ROOT)
    parser.add_argument("--export-root", default=DEFAULT_EXPORT_ROOT)
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.CRITICAL)
    opts = RunnerOpts(
        incremental_topology=not args.complete,
        generate_images=not args.no_images,
        only_highlighted_topology_image=not args.all_images,
    )
    run(args.name, opts, args.data_root, args.export_root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())