# pendulumviz

Tools for exploring the double pendulum, turning its motion into sound
samples and pixel frames, and generating procedural colour images. Everything
is computed on the CPU in plain Python.

## Modules

- `pendulumviz.pendulum`
  - `DoublePendulum`: angles, angular velocities, masses, lengths and gravity
    (starting at 90° for both arms, at rest, g = 9.81). `update(dt)` advances
    the state with fourth-order Runge-Kutta, `derivatives()` returns
    `(dtheta1, dtheta2, domega1, domega2)`, and `linear_velocities()` returns
    the speeds `(v1, v2)` of the two masses.
  - `velocity_to_frequency(normalized_velocity)` maps `[-1, 1]` onto
    100–1000 Hz.
  - `AudioState`: two sine voices with a shared volume.
    `update_frequencies(v1, v2, max_velocity)` sets pitch and volume from the
    velocities, `set_volume(volume)` clamps into `[0, 1]`, and
    `render(frames, channels, sample_rate=44100)` returns interleaved float
    samples (mono output mixes both voices).
- `pendulumviz.visualizer`
  - `VelocityVisualizer`: accumulates `(v1, v2)` visits of a pendulum into an
    800×800 map (size configurable). `update(delta_time)` runs four pendulum
    substeps, retunes its `AudioState` and records the point.
    `generate_visualization()` decays the map by 0.995 and returns an RGBA
    `bytearray` with grey axes, a white centre and a yellow cross at the
    current velocity. `reset()` and `reset_random(rng=None)` restart the
    pendulum and clear the map.
- `pendulumviz.synth`
  - `harmonic_mix(phase, vel)`: a normalised sum of five harmonics, with the
    upper ones brought in as velocity rises from 2 to 8.
  - `map_vel_to_freq(v, v_max, low, high)`: linear map of a clamped velocity.
  - `HarmonicOscillator`: left/right phase accumulators with frequencies,
    velocities and a `mute` flag; `render(frames, channels, sample_rate=44100.0)`
    returns interleaved samples, all zero while muted.
- `pendulumviz.simulation`
  - `SimulationParams`: view window (centre and half span of both angles),
    frame size, step count, time step, gravity, lengths, masses and damping.
  - `simulate_single(params, theta1, theta2)`: integrates one damped pendulum
    released at rest and returns `(trajectory, velocities, omega1, omega2)`.
  - `ParamControl.handle_key(key, pressed)`: keyboard tuning, returning
    `True` when a parameter changed. Digits `0`–`9` choose the sensitivity
    (0.0001 up to 10). `G`/`H` gravity, `L`/`K` first length, `J`/`U` second
    length, `M`/`N` first mass, `I`/`O` second mass (each ± 0.1 × sensitivity
    on a press), `T`/`Y` step count, `D`/`S` time step.
- `pendulumviz.explorer`
  - `FractalExplorer`: maps between screen pixels and starting angles
    (`screen_to_world`, `world_to_screen`), zooms (`zoom(scroll)`), pans
    (`pan(start, end)`), and on `click(x, y)` simulates from the angles under
    the point. `overlay_trajectory(frame)` draws the trajectory in red onto a
    caller-supplied RGBA frame, revealing four more points per call while
    animating and retuning its `HarmonicOscillator` from
    `current_velocities()`. `handle_key(key, pressed)` toggles the mute on
    `X` and passes other presses to its `ParamControl`.
- `pendulumviz.colorgen`
  - `generate_color_value(x, y, channel)` and `generate_image(width, height)`:
    a deterministic per-pixel colour generator returning a Pillow RGB image.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Generating an image

```
pendulumviz-colorgen
```

writes a 1024×1024 image, `output.png`, into the current directory. Options
`--output`/`-o`, `--width` and `--height` change the file and size.

## Using the library

```python
from pendulumviz.pendulum import DoublePendulum
from pendulumviz.simulation import SimulationParams, simulate_single

pendulum = DoublePendulum()
for _ in range(100):
    pendulum.update(0.01)
v1, v2 = pendulum.linear_velocities()

trajectory, velocities, omega1, omega2 = simulate_single(SimulationParams(), 1.0, 0.5)
```

## What the package does not do

- It opens no window and handles no input events itself; frames are returned
  or drawn into byte buffers, and key, scroll and click handling are methods
  the caller invokes.
- It plays no sound; oscillators return lists of float samples for the
  caller to send to an audio device.
- `FractalExplorer` does not compute the angle-plane fractal image; it only
  overlays a trajectory onto a frame the caller provides.