"""Text renderings of labelled transition systems."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pcsynth.directory import create_directory_for_path
from pcsynth.lts import LTS

_FONT = "Helvetica, Arial, sans - serif"


def format_value(value: Any) -> str:
    """Render a state name or label as text.

    A pair of a resource index and a label renders as ``index: label``;
    other sequences render comma-separated; None renders empty.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], int)
        and not isinstance(value[0], bool)
    ):
        return f"{value[0]}: {format_value(value[1])}"
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(item) for item in value)
    return str(value)


def to_dot(lts: LTS) -> str:
    """Render ``lts`` as a GraphViz digraph."""
    lines = [
        "digraph finite_state_machine {\n",
        f'\tfontname="{_FONT}"\n',
        f'\tnode [fontname="{_FONT}"]\n',
        f'\tedge [fontname="{_FONT}"]\n',
        "\trankdir=LR;\n",
        "\tnode [shape = doublecircle];\n",
        f'\t"{format_value(lts.initial_state)}";\n',
        "\tnode [shape = circle];\n",
    ]
    for name, state in lts.states.items():
        source = format_value(name)
        if state.is_empty():
            lines.append(f'\t"{source}"\n')
            continue
        lines.extend(
            f'\t"{source}" -> "{format_value(t.to)}" [label = "{format_value(t.label)}"];\n'
            for t in state.transitions
        )
    lines.append("}")
    return "".join(lines)


def describe_lts(lts: LTS) -> str:
    """Render ``lts`` as a human-readable listing of states and transitions."""
    if not lts.initial_state and not lts.states:
        return "Empty Labelled Transition System\n"
    lines = [f"Initial state: {format_value(lts.initial_state)}\n"]
    for name, state in lts.states.items():
        lines.append(f"State name: {format_value(name)}\n")
        if state.is_empty():
            lines.append("  With 0 transitions\n")
            continue
        lines.append("  Transitions: \n")
        lines.extend(
            f"    Label: {format_value(t.label)} End State: {format_value(t.to)}\n"
            for t in state.transitions
        )
    return "".join(lines)


def export_to_file(lts: LTS, path: str | os.PathLike[str]) -> None:
    """Write the GraphViz rendering of ``lts`` to ``path``, creating directories."""
    create_directory_for_path(path)
    Path(path).write_text(to_dot(lts), encoding="utf-8")