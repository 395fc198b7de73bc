"""Harmonic stereo oscillator whose timbre follows the pendulum's velocities."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_LOW_HZ = 100.0
DEFAULT_HIGH_HZ = 1000.0
DEFAULT_SAMPLE_RATE = 44100.0

_T_LOW = 2.0
_T_HIGH = 8.0
_HARMONICS = range(1, 6)


def _clamp(value: float, low: float, high: float) -> float:
    if math.isnan(value):
        return value
    return max(low, min(high, value))


def harmonic_mix(phase: float, vel: float) -> float:
    """Return a normalised sum of five harmonics of ``phase``.

    Slow velocities weight the fundamental and second harmonic; faster ones
    bring in harmonics three to five.
    """
    u = _clamp((vel - _T_LOW) / (_T_HIGH - _T_LOW), 0.0, 1.0)
    total = 0.0
    norm = 0.0
    for h in _HARMONICS:
        weight = 1.0 - u * 0.5 if h <= 2 else u * (h / 5.0)
        total += weight * math.sin(phase * h)
        norm += weight
    return total / norm


def map_vel_to_freq(v: float, v_max: float, low: float, high: float) -> float:
    """Map a velocity in [-v_max, v_max] linearly onto [low, high]."""
    clamped = -v_max if math.isnan(v) else max(-v_max, min(v_max, v))
    t = (clamped + v_max) / (2.0 * v_max)
    return low + t * (high - low)


@dataclass
class HarmonicOscillator:
    """Two phase accumulators feeding a harmonic mix for left and right channels."""

    freq_left: float = (DEFAULT_LOW_HZ + DEFAULT_HIGH_HZ) / 2.0
    freq_right: float = (DEFAULT_LOW_HZ + DEFAULT_HIGH_HZ) / 2.0
    vel_left: float = 0.0
    vel_right: float = 0.0
    mute: bool = False
    phase_left: float = 0.0
    phase_right: float = 0.0

    def render(
        self, frames: int, channels: int, sample_rate: float = DEFAULT_SAMPLE_RATE
    ) -> list[float]:
        """Produce ``frames`` interleaved frames of ``channels`` samples each.

        The first channel carries the left voice, the second the right one;
        any further channels stay silent. While muted, every sample is zero
        and the phases do not advance.
        """
        if channels < 1:
            raise ValueError("channels must be at least 1")
        if sample_rate <= 0:
            raise ValueError("sample_rate must be positive")

        out: list[float] = []
        silence = [0.0] * channels
        step = 2.0 * math.pi / sample_rate
        for _ in range(frames):
            if self.mute:
                out.extend(silence)
                continue

            vel_l = abs(self.vel_left)
            vel_r = abs(self.vel_right)

            self.phase_left += self.freq_left * step
            self.phase_right += self.freq_right * step
            if self.phase_left > math.tau:
                self.phase_left -= math.tau
            if self.phase_right > math.tau:
                self.phase_right -= math.tau

            sample_l = harmonic_mix(self.phase_left, vel_l)
            if channels > 1:
                sample_r = harmonic_mix(self.phase_right, vel_r)
                out.extend([sample_l, sample_r] + [0.0] * (channels - 2))
            else:
                out.append(sample_l)
        return out