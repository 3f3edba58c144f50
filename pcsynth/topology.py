"""Topologies: the combined transition system of several resources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

from pcsynth.labels import string_to_transfer
from pcsynth.lts import LTS, State, Transition

TopologyState = tuple[str, ...]
TopologyLabel = tuple[int, str]


def _is_transfer_label(label: str) -> bool:
    return "in:" in label or "out:" in label


def matching_transfer(
    ltss: Sequence[LTS],
    states: Sequence[str],
    index: int,
    transition: Transition,
) -> TopologyState | None:
    """Find the inverse of a transfer transition among the other resources.

    Returns the combined state reached by firing both transitions, or None
    when no other resource offers the inverse transfer from its current state.
    Raises ValueError when ``transition`` is not a transfer.
    """
    transfer = string_to_transfer(transition.label)
    if transfer is None:
        raise ValueError(f"not a transfer label: {transition.label!r}")
    inverse_name = transfer.inverse().name
    for other, lts in enumerate(ltss):
        if other == index:
            continue
        for candidate in lts.states[states[other]].transitions:
            if inverse_name in candidate.label:
                result = list(states)
                result[index] = transition.to
                result[other] = candidate.to
                return tuple(result)
    return None


def _successors(
    ltss: Sequence[LTS], key: TopologyState
) -> Iterator[tuple[TopologyLabel, TopologyState]]:
    """Yield the labelled moves available from a combined state, in order."""
    for index, lts in enumerate(ltss):
        for transition in lts.states[key[index]].transitions:
            label = transition.label
            if _is_transfer_label(label):
                target = matching_transfer(ltss, key, index, transition)
                if target is None:
                    continue
            else:
                moved = list(key)
                moved[index] = transition.to
                target = tuple(moved)
            yield (index, label), target


class Topology(ABC):
    """The combined transition system of a set of resources."""

    def __init__(self, ltss: list[LTS]) -> None:
        self._ltss = ltss
        self._topology = LTS()

    @property
    def lts(self) -> LTS:
        """The combined transition system computed so far."""
        return self._topology

    @property
    def initial_state(self) -> TopologyState:
        """The combined initial state of all resources."""
        return self._topology.initial_state

    def _initial_key(self) -> TopologyState:
        return tuple(lts.initial_state for lts in self._ltss)

    @abstractmethod
    def at(self, key: Sequence[str]) -> State:
        """Return the combined state named by ``key``."""


class CompleteTopology(Topology):
    """A topology with every reachable combined state computed up front."""

    def __init__(self, ltss: list[LTS]) -> None:
        super().__init__(ltss)
        self._visited: set[TopologyState] = set()
        initial = self._initial_key()
        self._topology.set_initial_state(initial)
        self._explore(initial)

    def at(self, key: Sequence[str]) -> State:
        """Return the combined state; raises KeyError if it is unreachable."""
        return self._topology.states[tuple(key)]

    def _explore(self, start: TopologyState) -> None:
        # Depth-first, adding each transition just before descending into it.
        if start in self._visited:
            return
        self._visited.add(start)
        stack = [(start, _successors(self._ltss, start))]
        while stack:
            source, moves = stack[-1]
            step = next(moves, None)
            if step is None:
                stack.pop()
                continue
            label, target = step
            self._topology.add_transition(source, label, target)
            if target not in self._visited:
                self._visited.add(target)
                stack.append((target, _successors(self._ltss, target)))


class IncrementalTopology(Topology):
    """A topology whose states are expanded only when first visited."""

    def __init__(self, ltss: list[LTS]) -> None:
        super().__init__(ltss)
        initial = self._initial_key()
        self._topology.set_initial_state(initial, True)
        self._expand_state(initial)

    def at(self, key: Sequence[str]) -> State:
        """Return the combined state, expanding it on first access."""
        key = tuple(key)
        if key not in self._topology.states:
            self._topology.add_state(key)
            self._expand_state(key)
        return self._topology.states[key]

    def _expand_state(self, key: TopologyState) -> None:
        for label, target in _successors(self._ltss, key):
            self._topology.add_transition(key, label, target, False)