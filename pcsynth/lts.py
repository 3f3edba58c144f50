"""Labelled transition systems: states connected by labelled transitions."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Transition:
    """A labelled edge pointing at a target state."""

    label: Any
    to: Any


@dataclass
class State:
    """A state and its outgoing transitions, in insertion order."""

    transitions: list[Transition] = field(default_factory=list)

    def add_transition(self, label: Any, end_state: Hashable) -> None:
        """Append a transition with ``label`` to ``end_state``."""
        self.transitions.append(Transition(label, end_state))

    def transition_exists(self, label: Any, end_state: Hashable) -> bool:
        """Return whether an identical transition is already present."""
        return Transition(label, end_state) in self.transitions

    def is_empty(self) -> bool:
        """Return whether the state has no outgoing transitions."""
        return not self.transitions


class LTS:
    """A labelled transition system keyed by hashable state names.

    Keys are typically strings, or tuples of strings for combined systems.
    Labels may be any value that supports equality.
    """

    def __init__(self, initial_state: Hashable | None = None, create_initial: bool = True) -> None:
        self._states: dict[Hashable, State] = {}
        self._initial_state: Hashable | None = None
        if initial_state is not None:
            self.set_initial_state(initial_state, create_initial)

    @property
    def states(self) -> dict[Hashable, State]:
        """The mapping of state names to states."""
        return self._states

    @property
    def initial_state(self) -> Hashable | None:
        """The name of the initial state, or None if unset."""
        return self._initial_state

    def set_initial_state(self, state: Hashable, create_if_not_exists: bool = True) -> None:
        """Mark ``state`` as initial, creating it if asked and missing."""
        if create_if_not_exists:
            self.add_state(state)
        self._initial_state = state

    def has_state(self, key: Hashable) -> bool:
        return key in self._states

    def num_of_states(self) -> int:
        return len(self._states)

    def num_of_transitions(self) -> int:
        return sum(len(state.transitions) for state in self._states.values())

    def erase_shallow(self, key: Hashable) -> bool:
        """Remove a state, leaving transitions that point at it in place."""
        if key not in self._states:
            return False
        del self._states[key]
        return True

    def erase_deep(self, key: Hashable) -> bool:
        """Remove a state together with every transition that points at it."""
        if key not in self._states:
            return False
        del self._states[key]
        for state in self._states.values():
            state.transitions = [t for t in state.transitions if t.to != key]
        return True

    def add_transition(
        self,
        start_state: Hashable,
        label: Any,
        end_state: Hashable,
        create_missing_states: bool = True,
    ) -> None:
        """Add a transition, creating missing endpoints unless told not to.

        Raises KeyError when the start state is absent and may not be created.
        """
        if create_missing_states:
            self.add_state(start_state)
            self.add_state(end_state)
        self._states[start_state].add_transition(label, end_state)

    def add_state(self, key: Hashable) -> bool:
        """Add an empty state; return False if it already exists."""
        if key in self._states:
            return False
        self._states[key] = State()
        return True

    def __getitem__(self, key: Hashable) -> State:
        return self._states[key]

    def __contains__(self, key: object) -> bool:
        return key in self._states

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LTS):
            return NotImplemented
        return self._initial_state == other._initial_state and self._states == other._states

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"LTS(initial_state={self._initial_state!r}, "
            f"states={self.num_of_states()}, transitions={self.num_of_transitions()})"
        )