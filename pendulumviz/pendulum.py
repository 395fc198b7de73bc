"""Double pendulum dynamics and a stereo sine tone driven by its velocities."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

SAMPLE_RATE = 44100
LOW_FREQ = 100.0
HIGH_FREQ = 1000.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class DoublePendulum:
    """State and physical parameters of a double pendulum."""

    theta1: float = math.pi / 2.0
    theta2: float = math.pi / 2.0
    omega1: float = 0.0
    omega2: float = 0.0
    m1: float = 1.0
    m2: float = 1.0
    l1: float = 1.0
    l2: float = 1.0
    g: float = 9.81

    def _shifted(self, k: tuple[float, float, float, float], scale: float) -> DoublePendulum:
        return dataclasses.replace(
            self,
            theta1=self.theta1 + k[0] * scale,
            theta2=self.theta2 + k[1] * scale,
            omega1=self.omega1 + k[2] * scale,
            omega2=self.omega2 + k[3] * scale,
        )

    def update(self, dt: float) -> None:
        """Advance the state by dt using fourth-order Runge-Kutta."""
        k1 = self.derivatives()
        k2 = self._shifted(k1, dt * 0.5).derivatives()
        k3 = self._shifted(k2, dt * 0.5).derivatives()
        k4 = self._shifted(k3, dt).derivatives()

        step = [(a + 2.0 * b + 2.0 * c + d) * dt / 6.0 for a, b, c, d in zip(k1, k2, k3, k4)]
        self.theta1 += step[0]
        self.theta2 += step[1]
        self.omega1 += step[2]
        self.omega2 += step[3]

    def derivatives(self) -> tuple[float, float, float, float]:
        """Return (dtheta1, dtheta2, domega1, domega2)."""
        m1, m2, l1, l2, g = self.m1, self.m2, self.l1, self.l2, self.g
        delta = self.theta2 - self.theta1
        cos_d = math.cos(delta)
        sin_d = math.sin(delta)

        den1 = (m1 + m2) * l1 - m2 * l1 * cos_d * cos_d
        den2 = (l2 / l1) * den1

        num1 = (
            -m2 * l1 * self.omega1 * self.omega1 * sin_d * cos_d
            + m2 * g * math.sin(self.theta2) * cos_d
            + m2 * l2 * self.omega2 * self.omega2 * sin_d
            - (m1 + m2) * g * math.sin(self.theta1)
        )
        num2 = (
            -m2 * l2 * self.omega2 * self.omega2 * sin_d * cos_d
            + (m1 + m2) * g * math.sin(self.theta1) * cos_d
            + (m1 + m2) * l1 * self.omega1 * self.omega1 * sin_d
            - (m1 + m2) * g * math.sin(self.theta2)
        )
        return self.omega1, self.omega2, num1 / den1, num2 / den2

    def linear_velocities(self) -> tuple[float, float]:
        """Return the linear speeds (v1, v2) of the two masses."""
        v1 = self.omega1 * self.l1
        v2x = (
            self.l1 * self.omega1 * math.sin(-self.theta1)
            + self.l2 * self.omega2 * math.sin(-self.theta2)
        )
        v2y = (
            self.l1 * self.omega1 * math.cos(self.theta1)
            + self.l2 * self.omega2 * math.cos(self.theta2)
        )
        return v1, math.hypot(v2x, v2y)


def velocity_to_frequency(normalized_velocity: float) -> float:
    """Map a velocity in [-1, 1] onto [LOW_FREQ, HIGH_FREQ]."""
    t = (normalized_velocity + 1.0) * 0.5
    return LOW_FREQ + t * (HIGH_FREQ - LOW_FREQ)


@dataclass
class AudioState:
    """Two sine oscillators, one per stereo channel, with a shared volume."""

    left_frequency: float = 440.0
    right_frequency: float = 440.0
    volume: float = 0.1
    phase_left: float = 0.0
    phase_right: float = 0.0

    def update_frequencies(self, v1: float, v2: float, max_velocity: float) -> None:
        """Set pitches and volume from the two mass velocities."""
        self.left_frequency = velocity_to_frequency(_clamp(v1 / max_velocity, -1.0, 1.0))
        self.right_frequency = velocity_to_frequency(_clamp(v2 / max_velocity, -1.0, 1.0))
        magnitude = math.hypot(v1, v2)
        normalized = _clamp(magnitude / (max_velocity * math.sqrt(2.0)), 0.0, 1.0)
        self.volume = normalized * 0.2

    def set_volume(self, volume: float) -> None:
        """Set the volume, clamped into [0, 1]."""
        self.volume = _clamp(volume, 0.0, 1.0)

    def render(self, frames: int, channels: int, sample_rate: float = SAMPLE_RATE) -> list[float]:
        """Produce interleaved samples for the given number of frames."""
        if channels < 1:
            raise ValueError("channels must be at least 1")
        out: list[float] = []
        for _ in range(frames):
            left = math.sin(self.phase_left * 2.0 * math.pi) * self.volume
            self.phase_left += self.left_frequency / sample_rate
            if self.phase_left >= 1.0:
                self.phase_left -= 1.0

            right = math.sin(self.phase_right * 2.0 * math.pi) * self.volume
            self.phase_right += self.right_frequency / sample_rate
            if self.phase_right >= 1.0:
                self.phase_right -= 1.0

            if channels >= 2:
                out.extend([left, right] + [0.0] * (channels - 2))
            else:
                out.append((left + right) * 0.5)
        return out