"""Tracking of the parts held at each resource while a plan is built."""

from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

TopologyLabel = tuple[int, str]


class Parts:
    """The parts present at each resource, in arrival order."""

    def __init__(self, num_resources: int = 0) -> None:
        self._parts: list[list[str]] = [[] for _ in range(num_resources)]

    def at_resource(self, resource: int) -> list[str]:
        """Return a copy of the parts held at ``resource``."""
        return list(self._parts[resource])

    def add(self, transition: TopologyLabel, output: Sequence[str]) -> None:
        """Introduce ``output`` parts at the resource the transition belongs to."""
        resource = transition[0]
        logger.info("[Parts] Adding parts [%s] to resource %s", ",".join(output), resource)
        self._parts[resource].extend(output)

    def synchronize(self, in_resource: int, out_resource: int, parts: Sequence[str]) -> bool:
        """Move the listed parts from ``out_resource`` to ``in_resource``.

        Every matching part is moved; returns False when the number moved
        differs from the number of parts asked for.
        """
        wanted = set(parts)
        source = self._parts[out_resource]
        moved = [part for part in source if part in wanted]
        self._parts[out_resource] = [part for part in source if part not in wanted]
        self._parts[in_resource].extend(moved)
        if len(moved) != len(parts):
            logger.warning(
                "[Parts Sync] Not all parts were found at resource %s from set: %s",
                out_resource,
                ",".join(parts),
            )
            return False
        return True

    def allocate(self, transition: TopologyLabel, parts: Sequence[str]) -> bool:
        """Consume the listed parts at the transition's resource.

        Every matching part is removed; returns False when the number
        consumed differs from the number of parts asked for.
        """
        resource = transition[0]
        wanted = set(parts)
        held = self._parts[resource]
        consumed = [part for part in held if part in wanted]
        for part in consumed:
            logger.info("[Parts] Consuming part %s at resource %s", part, resource)
        self._parts[resource] = [part for part in held if part not in wanted]
        if len(consumed) != len(parts):
            logger.warning(
                "[Parts] Not all parts were found at resource %s from set: %s",
                resource,
                ",".join(parts),
            )
            return False
        return True

    def __copy__(self) -> Parts:
        clone = Parts()
        clone._parts = [list(held) for held in self._parts]
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parts):
            return NotImplemented
        return self._parts == other._parts

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines = []
        for resource, held in enumerate(self._parts):
            if not held:
                continue
            items = "".join(f"{part} " for part in held)
            lines.append(f"Parts at Resource {resource}:  {items}\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Parts({self._parts!r})"