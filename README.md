# pcsynth

pcsynth models machines and products as labelled transition systems (LTS) and
synthesises a controller that drives a set of resources through a product
recipe.

- **Resources** are plain LTSs (`pcsynth.lts.LTS`) whose transitions are
  operations (`load`, `separate`, ...) or transfers between resources
  (`in:2`, `out:2`).
- A **topology** (`pcsynth.topology`) combines the resources into one LTS whose
  states are tuples of resource states and whose labels are
  `(resource index, label)` pairs. `CompleteTopology` builds every reachable
  state up front; `IncrementalTopology` expands a state the first time `at()`
  is asked for it.
- A **recipe** (`pcsynth.recipe.Recipe`) is an LTS whose transitions are
  `CompositeOperation`s: an optional guard, sequential operations and parallel
  operations, each with input and output parts.
- The **controller** (`pcsynth.controller.Controller`) walks the recipe over
  the topology and records the transitions it takes;
  `pcsynth.highlighter.highlight_topology` marks that path on the topology.

Every LTS can be written out in Graphviz DOT format with
`pcsynth.writers.export_to_file`, or described as plain text with
`describe_lts`.

## Installation

```
pip install .
```

Rendering images needs the Graphviz `dot` program on your `PATH`. If it is
missing, a warning is logged and no images are made.

## Command line

```
pcsynth --help
```

```
pcsynth [name] [--complete] [--no-images] [--all-images]
        [--data-root DIR] [--export-root DIR] [-v]
```

- `name` — example folder name, default `hinge`.
- `--complete` — compute the complete topology instead of the incremental one.
- `--no-images` — do not run `dot`.
- `--all-images` — also render the plain topology, not only the highlighted one.
- `--data-root`, `--export-root` — defaults `../../data` and `../../exports`,
  relative to the working directory.
- `-v` — log progress.

The command reads `<data-root>/<name>/Resource1.txt`, `Resource2.txt`, ...
(as many as there are entries whose name contains "resource") and
`recipe.json`, builds the topology, generates the controller and writes
`recipe.txt`, `ResourceN.txt`, `topology.txt`, `controller.txt` and
`highlighted_topology.txt` as DOT files to
`<export-root>/<name>/incremental/` (or `complete/`), then renders them to PNG
with `dot` unless told not to.

## File formats

A resource LTS in text form has the initial state on its first line and one
transition per following line, `start label end`, where `end` takes the rest
of the line:

```
s0
s0 a1 s1
s1 a2 s2
```

The JSON form holds the same information:

```json
{
  "initialState": "s0",
  "transitions": [
    {"startState": "s0", "label": "a1", "endState": "s1"},
    {"startState": "s1", "label": "a2", "endState": "s2"}
  ]
}
```

A recipe is JSON of the same shape whose transition labels hold a `guard`
(`name`, `input`) and `sequential` and `parallel` lists of operations
(`name`, `input`, `output`).

## Library use

```python
from pcsynth.lts import LTS
from pcsynth.lts_parsers import read_lts, parse_lts_json
from pcsynth.writers import export_to_file
from pcsynth.labels import string_to_transfer
from pcsynth.parts import Parts

lts = LTS()
lts.add_transition("s0", "a1", "s1")
lts.add_transition("s1", "a2", "s2")
print(lts.num_of_states(), lts.num_of_transitions())   # 3 2

export_to_file(lts, "exports/lts.txt")                # Graphviz DOT

same = parse_lts_json({
    "initialState": "s0",
    "transitions": [
        {"startState": "s0", "label": "a1", "endState": "s1"},
    ],
})

transfer = string_to_transfer("out:2")
print(transfer.inverse().name)                          # in:2

parts = Parts(2)
parts.add((0, "load"), ["p1", "p2"])
print(parts.synchronize(1, 0, ["p1", "p2"]))            # True
print(parts.at_resource(1))                             # ['p1', 'p2']
```

Running a whole example from Python:

```python
from pcsynth.runner import RunnerOpts, run

opts = RunnerOpts(
    incremental_topology=True,
    generate_images=False,
    only_highlighted_topology_image=True,
)
controller = run("hinge", opts, "data", "exports")
```

`Controller.generate()` always returns the controller LTS built so far; whether
the whole recipe was realised is left in the controller's `realisable`
attribute.

`pcsynth.examples` holds small worked examples: `merge_example` merges
resources into their complete topology and reports on it, `experimental`
synthesises a controller for two resources, and `experimental2` exports a
one-transition system.

## Limitations

- The controller follows only the sequential operations of each recipe
  transition. Guards and parallel operations are parsed and printed but not
  acted on.
- Input parts are not checked while a controller is generated; output parts
  are recorded with `Parts.add`. `Parts.allocate` and `Parts.synchronize` are
  available for your own use.
- Resources are added to an `Environment` but never removed; adding one after
  a topology has been computed needs `complete()` or `incremental()` again.