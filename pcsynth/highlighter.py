"""GraphViz rendering of a topology with the controller's path highlighted."""

from __future__ import annotations

import os
from collections.abc import Hashable
from pathlib import Path

from pcsynth.directory import create_directory_for_path
from pcsynth.lts import LTS
from pcsynth.writers import format_value

_FONT = "Helvetica, Arial, sans - serif"


def build_target_map(controller: LTS) -> dict[Hashable, set[str]]:
    """Map each controller state to the operation names it fires.

    Idle entries (empty or ``-``) in the controller labels are skipped.
    """
    return {
        name: {entry for t in state.transitions for entry in t.label if entry not in ("", "-")}
        for name, state in controller.states.items()
    }


def _highlight_dot(topology: LTS, controller: LTS) -> str:
    lines = [
        "digraph finite_state_machine {\n",
        f'\tfontname="{_FONT}"\n',
        f'\tnode [fontname="{_FONT}"]\n',
        f'\tedge [fontname="{_FONT}"]\n',
        "\trankdir=LR;\n",
        "\tnode [shape = doublecircle];\n",
        f'\t"{format_value(topology.initial_state)}";\n',
        "\tnode [shape = circle];\n",
    ]
    target_map = build_target_map(controller)
    for name, state in topology.states.items():
        source = format_value(name)
        if state.is_empty():
            lines.append(f'\t"{source}"\n')
        targets = target_map.get(name, set())
        for t in state.transitions:
            edge = f'\t"{source}" -> "{format_value(t.to)}"'
            label = format_value(t.label)
            if t.label[1] in targets:
                lines.append(f'{edge} [color="royalblue4" penwidth=2.25 label = "{label}"];\n')
                lines.append(f'\t"{source}" [shape=circle, style=filled, fillcolor=dodgerblue2]\n')
            else:
                lines.append(f'{edge} [label = "{label}"];\n')
    lines.append("}")
    return "".join(lines)


def highlight_topology(topology: LTS, controller: LTS, out_path: str | os.PathLike[str]) -> None:
    """Write the topology as GraphViz to ``out_path``, marking the controller's moves."""
    create_directory_for_path(out_path)
    Path(out_path).write_text(_highlight_dot(topology, controller), encoding="utf-8")