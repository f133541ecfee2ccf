# entropyzero

A small set of scientific simulations that run without a window. Each
simulation describes itself with an id, a name, a place in a scientific
taxonomy, a parameter schema, a difficulty rating and tags. Each one can also
build a running model that you step forward in time.

## Simulations

- **Particle System** (`particle_system`): 100,000 particles by default fall
  under gravity and bounce inside a box. At each wall a particle keeps 80% of
  its speed along that axis.
- **Binary Spiral** (`binary_spiral`): two sources orbit the origin and emit
  particles in all directions into a fixed-size ring pool. Each particle is
  tinted toward cyan or toward red-pink by how well its direction lines up
  with its source's motion.
- **Ripple Tank** (`ripple_tank`): a finite-difference wave solver on a
  640 × 400 grid. It supports point, line, phased-array and moving sources,
  reflectors, single and double slits, refraction blocks, oscilloscope probes
  and rulers.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and then run pytest:

```
pip install .[test]
pytest
```

## Command line

```
entropyzero [simulation] [--list] [--frames N] [--dt SECONDS] [--verbose]
```

- `simulation` is one of `particle_system`, `ripple_tank` or `binary_spiral`.
  It defaults to `binary_spiral`.
- `--list` prints each simulation's id, name and domain, then exits.
- `--frames` sets how many frames to run (default 60).
- `--dt` sets the frame duration in seconds (default 1/60).
- `--verbose` turns on debug logging.

The command runs the chosen simulation headless and prints a one-line
summary. For the binary spiral it also prints the number of active particles.
For the ripple tank it also prints a status line with the frame rate and the
simulated time.

## Library use

```python
from entropyzero.cli import all_simulations

for simulation in all_simulations():
    print(simulation.id, simulation.category.display_name())

tank = next(s for s in all_simulations() if s.id == "ripple_tank").create()
tank.step(1 / 60)
image = tank.render_image()  # numpy uint8 array, shape (400, 640, 4), RGBA
```

### Simulation catalogue

- `entropyzero.simulation` defines the abstract `Simulation` class,
  `SimulationMetadata` and `metadata_of`.
- `entropyzero.taxonomy` classifies simulations into domains and subdomains
  (`SimulationCategory`, `Domain`, `ScienceBranch`).

### Parameters

- `entropyzero.parameters` holds the parameter schema types:
  `FloatParameter`, `IntParameter`, `BoolParameter`, `Vec3Parameter`,
  `ColorParameter` and `EnumParameter`.
- `entropyzero.parameter_store.SimulationParameters.from_defs` turns a schema
  into live values.
- `SimulationParameters.set` checks the type of each new value and clamps
  numbers to the parameter's range.

### Running models

`ParticleSystem` (in `entropyzero.particles`):

- `step(dt)`, `update_stats(dt)` and `toggle_pause()`.

`BinarySpiral` (in `entropyzero.binary_spiral`):

- `step(dt)` runs one frame.
- `handle_pointer(origin, direction, pressed, released)` picks a source and
  drags it to change its orbit radius.
- `point_cloud()` returns vertex positions and RGBA colours for drawing.

`RippleTank` (in `entropyzero.ripple_physics`):

- `step(dt)` runs one frame, and `render_image()` returns the image.
- `handle_key` responds to `space` (pause), `c` (clear waves) and `g` (toggle
  grid).
- `press`, `drag`, `release` and `right_click` select or place objects, using
  the tool set in `tank.ui.selected_tool`.
- `tank.scene` is a `Scene` you can also populate directly.

`fit_camera` computes the zoom and offset that fit the tank between the side,
top and bottom panels.

### Helpers

- `entropyzero.reports` produces the text of the status read-outs, for
  example probe readings, block-character sparklines and ruler lengths.
- The physics helpers are plain functions that take `Vec3` values from
  `entropyzero.vector`:
  - `entropyzero.forces`: `gravitational_force`, `spring_force` and
    `damping_force`.
  - `entropyzero.integrators`: `euler_integrate`, `semi_implicit_euler`,
    `verlet_integrate` and `rk4_integrate`. Each returns a new
    `(position, velocity)` pair.
- `entropyzero.mathutils` provides `clamp`, `lerp`, `lerp_vec3`,
  `smoothstep`, `map_range` and a few physical constants.

## What it does not do

The package has no window, renderer or interactive control panel. Nothing is
drawn on screen.

The models expose the data needed for drawing: RGBA images, point clouds,
grid and ring line segments, materials, and camera placement. Pointer and key
events have to be fed to the models by the caller. The command line only runs
simulations for a number of frames and prints text.