"""Phase-space heat map of the two mass velocities of a double pendulum."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from .pendulum import AudioState, DoublePendulum

WIDTH = 800
HEIGHT = 800
SUBSTEPS = 4
DECAY = 0.995

_AXIS = (128, 128, 128)
_CENTER = (255, 255, 255)
_MARKER = (255, 255, 0)


def _to_u8(value: float) -> int:
    """Truncate towards zero and saturate into 0..255; NaN becomes 0."""
    if math.isnan(value):
        return 0
    return max(0, min(255, int(value)))


@dataclass
class VelocityVisualizer:
    """Accumulates (v1, v2) visits into a decaying map and renders it as RGBA."""

    width: int = WIDTH
    height: int = HEIGHT
    max_velocity: float = 10.0
    pendulum: DoublePendulum = field(default_factory=DoublePendulum)
    audio: AudioState = field(default_factory=AudioState)
    time: float = 0.0
    velocity_map: list[float] = field(init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        self.velocity_map = [0.0] * (self.width * self.height)

    def update(self, delta_time: float) -> None:
        """Advance the pendulum, retune the audio and record the new velocity point."""
        self.time += delta_time
        dt = delta_time / SUBSTEPS
        for _ in range(SUBSTEPS):
            self.pendulum.update(dt)

        v1, v2 = self.pendulum.linear_velocities()
        self.audio.update_frequencies(v1, v2, self.max_velocity)

        x = self.velocity_to_pixel(v1, self.width)
        y = self.velocity_to_pixel(v2, self.height)
        if x < self.width and y < self.height:
            self.velocity_map[y * self.width + x] += 1.0

    def velocity_to_pixel(self, velocity: float, dimension: int) -> int:
        """Map a velocity in [-max, max] onto a pixel index in [0, dimension)."""
        normalized = (velocity / self.max_velocity + 1.0) * 0.5
        scaled = normalized * dimension
        pixel = 0 if math.isnan(scaled) or scaled <= 0.0 else int(min(scaled, 2.0**32 - 1))
        return min(pixel, dimension - 1)

    def generate_visualization(self) -> bytearray:
        """Decay the map and return an RGBA frame with axes and the current position."""
        self.velocity_map = [value * DECAY for value in self.velocity_map]
        max_intensity = max(1.0, max(self.velocity_map, default=0.0))

        frame = bytearray()
        for value in self.velocity_map:
            intensity = value / max_intensity
            frame += bytes(
                (
                    _to_u8(intensity * 255.0),
                    _to_u8(min(intensity * 2.0, 1.0) * 255.0),
                    _to_u8(min(intensity * 4.0, 1.0) * 255.0),
                    255,
                )
            )

        self.draw_axes(frame)
        v1, v2 = self.pendulum.linear_velocities()
        self.draw_current_position(frame, v1, v2)
        return frame

    def _paint(self, frame: bytearray, x: int, y: int, color: tuple[int, int, int]) -> None:
        index = (y * self.width + x) * 4
        if index + 3 < len(frame):
            frame[index:index + 3] = bytes(color)

    def draw_axes(self, frame: bytearray) -> None:
        """Draw the v1 = 0 and v2 = 0 axes in grey with a white centre point."""
        center_x = self.width // 2
        center_y = self.height // 2
        for y in range(self.height):
            self._paint(frame, center_x, y, _AXIS)
        for x in range(self.width):
            self._paint(frame, x, center_y, _AXIS)
        self._paint(frame, center_x, center_y, _CENTER)

    def draw_current_position(self, frame: bytearray, v1: float, v2: float) -> None:
        """Draw a small yellow cross at the pixel for (v1, v2)."""
        x = self.velocity_to_pixel(v1, self.width)
        y = self.velocity_to_pixel(v2, self.height)
        for dx in range(-2, 3):
            for dy in range(-2, 3):
                if dx != 0 and dy != 0:
                    continue
                px, py = x + dx, y + dy
                if 0 <= px < self.width and 0 <= py < self.height:
                    self._paint(frame, px, py, _MARKER)

    def _clear(self) -> None:
        self.velocity_map = [0.0] * (self.width * self.height)

    def reset(self) -> None:
        """Restore the default pendulum and clear the map."""
        self.pendulum = DoublePendulum()
        self._clear()

    def reset_random(self, rng: random.Random | None = None) -> None:
        """Start the pendulum from random angles and velocities and clear the map."""
        rng = rng if rng is not None else random.Random()
        self.pendulum = DoublePendulum()
        self.pendulum.theta1 = rng.random() * math.pi
        self.pendulum.theta2 = rng.random() * math.pi
        self.pendulum.omega1 = (rng.random() - 0.5) * 2.0
        self.pendulum.omega2 = (rng.random() - 0.5) * 2.0
        self._clear()