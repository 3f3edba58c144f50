"""Composite operations: the labels of recipe transitions."""

from __future__ import annotations

from dataclasses import dataclass, field

from pcsynth.operations import Guard, Observable
from pcsynth.strings import vector_to_string

TaskTuple = tuple[Observable, list[str], list[str]]


def _empty_guard() -> tuple[Guard, list[str]]:
    return (Guard(), [])


def _render_tasks(tasks: list[TaskTuple]) -> str:
    return "; ".join(
        f"{op.name}({vector_to_string(inputs)})({vector_to_string(outputs)})"
        for op, inputs, outputs in tasks
    )


@dataclass
class CompositeOperation:
    """A guard with its input parts, plus sequential and parallel tasks.

    Each task is a tuple of the operation, its input parts and its output parts.
    """

    guard: tuple[Guard, list[str]] = field(default_factory=_empty_guard)
    sequential: list[TaskTuple] = field(default_factory=list)
    parallel: list[TaskTuple] = field(default_factory=list)

    def has_guard(self) -> bool:
        return self.guard[0].name != ""

    def describe(self) -> str:
        """Return a human-readable listing of the operations."""
        out = []
        if self.has_guard():
            out.append("Guard operation: \n")
            out.append(f"  Guard name: {self.guard[0].name}\n")
        if self.sequential:
            out.append("  Sequential operations:\n")
            out.extend(f"  Operation Name: {op.name}\n\n" for op, _, _ in self.sequential)
        if self.parallel:
            out.append("  Parallel operations:\n")
            out.extend(f"  Operation Name: {op.name}\n\n" for op, _, _ in self.parallel)
        return "".join(out)

    def __str__(self) -> str:
        out = []
        if self.has_guard():
            out.append(f"{{ {self.guard[0].name}({vector_to_string(self.guard[1])}) }}; ")
        out.append(_render_tasks(self.sequential))
        if self.parallel:
            out.append("|| ")
            out.append(_render_tasks(self.parallel))
        return "".join(out)