"""The machine environment: a set of resources and their topology."""

from __future__ import annotations

import os
from collections.abc import Iterable

from pcsynth.directory import create_directory_for_path
from pcsynth.lts import LTS
from pcsynth.lts_parsers import read_lts, read_lts_json
from pcsynth.topology import CompleteTopology, IncrementalTopology, Topology
from pcsynth.writers import export_to_file


class Environment:
    """Resources of a machine, with an optional computed topology."""

    def __init__(self, resources: Iterable[LTS] | None = None, compute_topology: bool = False) -> None:
        self._resources: list[LTS] = list(resources) if resources is not None else []
        self._topology: Topology | None = None
        if compute_topology:
            self.complete()

    @property
    def resources(self) -> tuple[LTS, ...]:
        """The resources, in the order they were added."""
        return tuple(self._resources)

    @property
    def topology(self) -> Topology | None:
        """The current topology, or None before one is computed."""
        return self._topology

    def num_of_resources(self) -> int:
        return len(self._resources)

    def num_of_topology_states(self) -> int:
        """Return the number of states in the topology.

        Raises RuntimeError if no topology has been computed.
        """
        return self._require_topology().lts.num_of_states()

    def complete(self) -> None:
        """Compute the complete topology of the resources."""
        self._topology = CompleteTopology(self._resources)

    def incremental(self) -> None:
        """Start an incremental topology over the resources."""
        self._topology = IncrementalTopology(self._resources)

    def add_resource(self, resource: LTS) -> None:
        """Add a resource LTS to the machine."""
        self._resources.append(resource)

    def load_resource(self, filepath: str | os.PathLike[str], is_json: bool = False) -> None:
        """Read a resource from a text or JSON file and add it."""
        lts = read_lts_json(filepath) if is_json else read_lts(filepath)
        self.add_resource(lts)

    def _require_topology(self) -> Topology:
        if self._topology is None:
            raise RuntimeError("no topology has been computed")
        return self._topology


def export_environment(environment: Environment, directory: str | os.PathLike[str]) -> None:
    """Write each resource and the topology as GraphViz files into ``directory``.

    Resources go to ``ResourceN.txt`` (numbered from 1) and the topology to
    ``topology.txt``. Raises RuntimeError if no topology has been computed.
    """
    topology = environment._require_topology()
    create_directory_for_path(directory)
    base = os.fspath(directory)
    for number, resource in enumerate(environment.resources, start=1):
        export_to_file(resource, f"{base}/Resource{number}.txt")
    export_to_file(topology.lts, f"{base}/topology.txt")