"""Interactive exploration of the double pendulum angle plane.

The view maps the two start angles onto the screen. It supports zooming,
panning and clicking. A click simulates one pendulum from the chosen angles,
overlays its trajectory on the frame and drives the oscillator from its
angular velocities.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .simulation import ParamControl, SimulationParams, simulate_single
from .synth import DEFAULT_HIGH_HZ, DEFAULT_LOW_HZ, HarmonicOscillator, map_vel_to_freq

logger = logging.getLogger(__name__)

MAX_VELOCITY = 10.0
ANIMATION_STEP = 4
_RED = bytes((255, 0, 0, 255))
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _to_i32(value: float) -> int:
    """Truncate towards zero and saturate into the 32-bit range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _to_freq(velocity: float) -> float:
    return map_vel_to_freq(velocity, MAX_VELOCITY, DEFAULT_LOW_HZ, DEFAULT_HIGH_HZ)


@dataclass
class FractalExplorer:
    """View, trajectory animation and audio state of the angle-plane explorer."""

    control: ParamControl = field(default_factory=ParamControl)
    oscillator: HarmonicOscillator = field(default_factory=HarmonicOscillator)
    screen_w: float = 800.0
    screen_h: float = 800.0
    time: float = 0.0
    trajectory: list[tuple[float, float]] | None = None
    traj_velocities: list[tuple[float, float]] | None = None
    traj_index: int = 0
    animate_traj: bool = False
    click_angles: tuple[float, float] | None = None

    @property
    def params(self) -> SimulationParams:
        """The simulation parameters being explored."""
        return self.control.params

    def update(self, delta_time: float) -> None:
        """Advance the running clock."""
        self.time += delta_time

    def handle_key(self, key: str, pressed: bool) -> bool:
        """Apply a key event; return True when the frame needs redrawing.

        Only presses are acted on. X toggles the mute; other keys go to the
        parameter control.
        """
        if not pressed:
            return False
        if str(key).upper() == "X":
            self.oscillator.mute = not self.oscillator.mute
            logger.info("Audio %s", "muted" if self.oscillator.mute else "unmuted")
            return True
        return self.control.handle_key(key, True)

    def _check_frame(self, frame: bytearray) -> None:
        needed = self.params.width * self.params.height * 4
        if len(frame) < needed:
            raise ValueError(f"frame holds {len(frame)} bytes, needs {needed}")

    def _draw_block(self, frame: bytearray, x: int, y: int) -> None:
        width, height = self.params.width, self.params.height
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                px, py = x + dx, y + dy
                if 0 <= px < width and 0 <= py < height:
                    index = (py * width + px) * 4
                    frame[index:index + 4] = _RED

    def _draw_trajectory(self, frame: bytearray) -> None:
        if self.trajectory is None or self.click_angles is None:
            return
        if self.animate_traj:
            self.traj_index = min(self.traj_index + ANIMATION_STEP, len(self.trajectory))
            count = self.traj_index
        else:
            count = len(self.trajectory)

        previous: tuple[int, int] | None = None
        for th1, th2 in self.trajectory[:count]:
            sx, sy = self.world_to_screen(th1, th2)
            self._draw_block(frame, sx, sy)
            if previous is not None:
                px, py = previous
                dx, dy = sx - px, sy - py
                steps = max(abs(dx), abs(dy), 1)
                for i in range(1, steps + 1):
                    self._draw_block(
                        frame, px + _trunc_div(dx * i, steps), py + _trunc_div(dy * i, steps)
                    )
            previous = (sx, sy)

    def overlay_trajectory(self, frame: bytearray) -> bool:
        """Draw the clicked trajectory onto an RGBA frame.

        While animating, each call reveals a few more points and retunes the
        oscillator from the current step. Returns True while the animation
        still has points to show.
        """
        self._check_frame(frame)
        self._draw_trajectory(frame)

        if not self.animate_traj:
            return False

        current = self.current_velocities()
        if current is not None:
            om1, om2 = current
            self.oscillator.freq_left = _to_freq(om1)
            self.oscillator.freq_right = _to_freq(om2)
            self.oscillator.vel_left = om1
            self.oscillator.vel_right = om2

        if self.trajectory is not None and self.traj_index >= len(self.trajectory):
            self.animate_traj = False
        return self.animate_traj

    def screen_to_world(self, x: float, y: float) -> tuple[float, float]:
        """Convert on-screen coordinates to the angles (theta1, theta2)."""
        params = self.params
        nx = (x / self.screen_w - 0.5) * 2.0
        ny = (y / self.screen_h - 0.5) * 2.0
        return (
            params.center_theta1 + nx * params.half_span1,
            params.center_theta2 + ny * params.half_span2,
        )

    def world_to_screen(self, theta1: float, theta2: float) -> tuple[int, int]:
        """Convert angles to pixel coordinates in the fixed frame buffer."""
        params = self.params
        nx = (theta1 - params.center_theta1) / params.half_span1
        ny = (theta2 - params.center_theta2) / params.half_span2
        return (
            _to_i32((nx * 0.5 + 0.5) * params.width),
            _to_i32((ny * 0.5 + 0.5) * params.height),
        )

    def zoom(self, scroll: float) -> None:
        """Zoom in for positive scroll, out for negative."""
        factor = max(1.0 + scroll * 0.1, 0.1)
        self.params.half_span1 /= factor
        self.params.half_span2 /= factor

    def pan(self, start: tuple[float, float], end: tuple[float, float]) -> None:
        """Move the view so that the world point under ``start`` follows the cursor to ``end``."""
        t1_start, t2_start = self.screen_to_world(*start)
        t1_end, t2_end = self.screen_to_world(*end)
        self.params.center_theta1 -= t1_end - t1_start
        self.params.center_theta2 -= t2_end - t2_start

    def click(self, x: float, y: float) -> tuple[float, float]:
        """Simulate from the angles under (x, y) and start animating the result.

        Returns the chosen angles.
        """
        theta1, theta2 = self.screen_to_world(x, y)
        self.click_angles = (theta1, theta2)
        trajectory, velocities, om1, om2 = simulate_single(self.params, theta1, theta2)
        self.trajectory = trajectory
        self.traj_velocities = velocities
        self.traj_index = 0
        self.animate_traj = True

        freq_left = _to_freq(om1)
        freq_right = _to_freq(om2)
        self.oscillator.freq_left = freq_left
        self.oscillator.freq_right = freq_right
        self.oscillator.vel_left = freq_left
        self.oscillator.vel_right = freq_right
        return theta1, theta2

    def current_velocities(self) -> tuple[float, float] | None:
        """Angular velocities at the animation's current step, if any are recorded."""
        if not self.traj_velocities:
            return None
        index = min(max(self.traj_index - 1, 0), len(self.traj_velocities) - 1)
        return self.traj_velocities[index]