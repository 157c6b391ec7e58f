# gaskit

gaskit simulates gas atoms in a cubic box with a round hole in its left wall.
Atoms start at random positions with normally distributed velocities, move in
straight lines and bounce off the walls. An atom that reaches the left wall
inside the hole leaves the box and its energy (squared speed) is recorded.

Periodically the simulation compares the mean squared speed of the atoms still
in the box with the mean energy of the atoms that escaped since the last
report. The first report comes on the 101st step, later ones every 100 steps.
If no atom escaped in an interval, the escape energy is NaN.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Running

```
gaskit
```

This runs the simulation without any display and writes:

- `engine_dump.html`: the coloured HTML log of the engine.
- `mes.txt`: one line per report, holding the average gas energy and the
  average energy of the escaped atoms.

Each report also prints the average gas energy, the average out energy and
their ratio (`coefficient`) to standard output.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--atoms N` | 3000000 | number of atoms |
| `--steps N` | 1000 | number of time steps to run |
| `--dt T` | 0.01 | time step |
| `--radius R` | 0.1 | radius of the hole in the left wall |
| `--mode {real,ideal}` | `ideal` | `real` adds atom–atom collisions and Lennard-Jones forces |
| `--log PATH` | `engine_dump.html` | HTML log file |
| `--stats PATH` | `mes.txt` | statistics file |
| `--seed N` | none | random seed |

The `real` mode compares every pair of atoms in a Python loop, so it is only
practical for small numbers of atoms.

## Using the library

```python
from gaskit.engine import Engine
from gaskit.atoms import Mode

engine = Engine(n_atoms=10_000, seed=1)
engine.set_mode(Mode.IDEAL)
for _ in range(201):
    report = engine.compute(delta_time=0.01, hole_radius=0.1)
    if report is not None:
        print(report.avg_energy, report.avg_out_energy, report.coefficient)
```

`Engine.compute` returns an `EnergyReport` on report steps and `None`
otherwise; it also writes the report text to standard output (or to the
`out` stream given to `Engine`) and, if a `stats_file` was given, a line to
it. `Engine` raises `EngineError` when the atom list cannot be built, for
example with fewer than one atom. `Engine.positions()` returns the live
`(n, 3)` array of coordinates.

The modules are:

- `gaskit.atoms`: `AtomList` stores positions, velocities and flags. It
  moves atoms (`update_positions`), handles wall and hole collisions and, in
  `Mode.REAL`, pair collisions and Lennard-Jones forces
  (`handle_interactions`), computes `avg_speed` and `avg_speed_squared`,
  writes speeds to a file (`dump_velocities`) and keeps spatial cell lists
  (`adjust_lists`, `cell_members`, `dump_divisions`). `box_muller` turns
  uniform samples into normal ones.
- `gaskit.engine`: `Engine`, `EnergyReport` and `EngineError`.
- `gaskit.scene`: view geometry and controls: `box_vertices`, `hole_circle`,
  `scene_lines` (line-segment endpoints of the box and the hole outline),
  `controls_text`, and `ViewState`, which applies key presses
  (`handle_key`) and gives the 4×4 `rotation_matrix`.
- `gaskit.shaders`: `load_shaders` reads shader source files in order.
- `gaskit.logs`: `HtmlLog` and `open_log` write the coloured, time-stamped
  HTML log; `current_time_str` gives the time as `HH:MM:SS`.

## What gaskit does not do

gaskit does not open a window or draw anything. `gaskit.scene` and
`gaskit.shaders` provide the geometry, view state and shader texts a viewer
would use, but no rendering is included, and the `gaskit` command runs only
the headless simulation for a fixed number of steps.