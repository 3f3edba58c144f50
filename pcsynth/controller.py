"""Synthesis of a controller that drives the topology through a recipe."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pcsynth.composite import CompositeOperation
from pcsynth.environment import Environment
from pcsynth.labels import string_to_transfer
from pcsynth.lts import LTS
from pcsynth.operations import Observable, TransferOperation
from pcsynth.parts import Parts
from pcsynth.recipe import Recipe
from pcsynth.topology import Topology

logger = logging.getLogger(__name__)

TopologyState = tuple[str, ...]
TaskTuple = tuple[Observable, list[str], list[str]]
_IDLE = "-"


@dataclass(frozen=True)
class PlanTransition:
    """A controller transition planned while evaluating a composite operation."""

    from_state: TopologyState
    label: tuple[str, ...]
    to: TopologyState


class Controller:
    """Builds a controller LTS realising a recipe over a machine's topology."""

    def __init__(self, machine: Environment, topology: Topology, recipe: Recipe) -> None:
        self._machine = machine
        self._topology = topology
        self._recipe = recipe
        self._num_of_resources = machine.num_of_resources()
        self._controller = LTS()
        self.realisable = False

    @property
    def lts(self) -> LTS:
        """The controller built so far."""
        return self._controller

    def generate(self) -> LTS:
        """Build the controller and return it.

        The controller is returned however far generation got; whether the
        recipe was fully realised is recorded in ``realisable``.
        """
        recipe_state = self._recipe.lts.initial_state
        self._controller.set_initial_state(self._topology.initial_state, True)
        parts = Parts(self._machine.num_of_resources())
        logger.info("Controller initial state %s", ",".join(self._controller.initial_state))
        logger.info("Recipe initial state: %s", recipe_state)
        self.realisable = self._process_recipe(recipe_state, self._controller.initial_state, parts)
        logger.info("Controller generation completed: realisability = %s", self.realisable)
        return self._controller

    def _process_recipe(self, recipe_state: str, topology_state: TopologyState, parts: Parts) -> bool:
        realisable = True
        for transition in self._recipe.lts[recipe_state].transitions:
            logger.info("Processing recipe transition to: %s", transition.to)
            result = self._handle_composite(transition.label, topology_state, parts)
            if result is None:
                return False
            next_state, next_parts = result
            if not self._process_recipe(transition.to, next_state, next_parts):
                realisable = False
        return realisable

    def _handle_composite(
        self, co: CompositeOperation, topology_state: TopologyState, parts: Parts
    ) -> tuple[TopologyState, Parts] | None:
        state = topology_state
        for task in co.sequential:
            op, inputs, outputs = task
            logger.info(
                'Handling operation: "%s" with input parts [%s] and output parts [%s]',
                op.name,
                ",".join(inputs),
                ",".join(outputs),
            )
            result = self._handle_sequential(state, [], parts, task)
            if result is None:
                return None
            state, parts = result
        return state, parts

    def _handle_sequential(
        self,
        topology_state: TopologyState,
        plan_transitions: Iterable[PlanTransition],
        parts: Parts,
        task: TaskTuple,
    ) -> tuple[TopologyState, Parts] | None:
        op, _inputs, outputs = task
        plan = list(plan_transitions)
        # Transfer key -> [end state, out transition label, inverse transition label]
        transfers: dict[TransferOperation, list] = {}

        for transition in self._topology.at(topology_state).transitions:
            index, name = transition.label
            if op.name == name:
                label = [_IDLE] * self._num_of_resources
                label[index] = name
                plan.append(PlanTransition(topology_state, tuple(label), transition.to))
                self._apply_all(plan)
                updated = copy.copy(parts)
                updated.add(transition.label, outputs)
                return transition.to, updated
            transfer = string_to_transfer(name)
            if transfer is None:
                continue
            if transfer.is_out():
                entry = transfers.setdefault(transfer, [None, None, None])
                entry[0] = transition.to
                entry[1] = transition.label
            else:
                entry = transfers.setdefault(transfer.inverse(), [None, None, None])
                entry[2] = transition.label

        for transfer, (end_state, out_label, in_label) in transfers.items():
            if end_state is None or in_label is None:
                continue
            label = [_IDLE] * self._num_of_resources
            label[out_label[0]] = transfer.name
            label[in_label[0]] = in_label[1]
            plan.append(PlanTransition(topology_state, tuple(label), end_state))
            found = self._handle_sequential(end_state, plan, parts, task)
            if found is not None:
                return found
        return None

    def _apply_transition(self, plan_t: PlanTransition) -> None:
        self._controller.add_transition(plan_t.from_state, plan_t.label, plan_t.to)
        logger.info(
            "Adding controller transition from %s with label (%s) to %s",
            ",".join(plan_t.from_state),
            ",".join(plan_t.label),
            ",".join(plan_t.to),
        )

    def _apply_all(self, plan_transitions: Iterable[PlanTransition]) -> None:
        for plan_t in plan_transitions:
            self._apply_transition(plan_t)