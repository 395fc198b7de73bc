"""Damped double pendulum simulation parameters, integrator and keyboard tuning."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

WIDTH = 800
HEIGHT = 800

_SENSITIVITY_KEYS = {
    "0": 0.0001,
    "1": 0.001,
    "2": 0.01,
    "3": 0.1,
    "4": 0.25,
    "5": 0.5,
    "6": 1.0,
    "7": 2.0,
    "8": 5.0,
    "9": 10.0,
}

# Keys that nudge a float parameter by +/- (change * sensitivity).
_NUDGE_KEYS = {
    "G": ("gravity", 1.0),
    "H": ("gravity", -1.0),
    "L": ("length1", 1.0),
    "K": ("length1", -1.0),
    "J": ("length2", 1.0),
    "U": ("length2", -1.0),
    "M": ("mass1", 1.0),
    "N": ("mass1", -1.0),
    "I": ("mass2", 1.0),
    "O": ("mass2", -1.0),
}


@dataclass
class SimulationParams:
    """Parameters of the pendulum fractal: view window, integrator and physics."""

    width: int = WIDTH
    height: int = HEIGHT
    time_steps: int = 1000
    dt: float = 0.01
    center_theta1: float = 0.0
    center_theta2: float = 0.0
    half_span1: float = math.pi
    half_span2: float = math.pi
    gravity: float = 9.81
    length1: float = 1.0
    length2: float = 1.0
    mass1: float = 1.0
    mass2: float = 1.0
    damping: float = 0.999


def simulate_single(
    params: SimulationParams, theta1: float, theta2: float
) -> tuple[list[tuple[float, float]], list[tuple[float, float]], float, float]:
    """Simulate one pendulum released at rest from (theta1, theta2).

    Returns the angle trajectory, the angular velocity history and the final
    two angular velocities.
    """
    th1, th2 = theta1, theta2
    om1 = om2 = 0.0

    dt = params.dt
    g = params.gravity
    l1, l2 = params.length1, params.length2
    m1, m2 = params.mass1, params.mass2
    damping = params.damping

    trajectory: list[tuple[float, float]] = []
    velocities: list[tuple[float, float]] = []
    for _ in range(max(0, params.time_steps)):
        c = math.cos(th1 - th2)
        s = math.sin(th1 - th2)
        denom = l1 * (2.0 * m1 + m2 - m2 * math.cos(2.0 * th1 - 2.0 * th2))

        num1 = (
            -m2 * g * math.sin(th1 - 2.0 * th2)
            - 2.0 * s * m2 * (om2 * om2 * l2 + om1 * om1 * l1 * c)
            - (m1 + m2) * g * math.sin(th1)
        )
        num2 = (
            2.0
            * s
            * (
                om1 * om1 * l1 * (m1 + m2)
                + g * (m1 + m2) * math.cos(th1)
                + om2 * om2 * l2 * m2 * c
            )
        )

        a1 = num1 / denom
        a2 = num2 / (l2 * denom)

        om1 = (om1 + a1 * dt) * damping
        om2 = (om2 + a2 * dt) * damping
        th1 += om1 * dt
        th2 += om2 * dt

        trajectory.append((th1, th2))
        velocities.append((om1, om2))

    return trajectory, velocities, om1, om2


@dataclass
class ParamControl:
    """Keyboard-driven tuning of simulation parameters with a selectable step size."""

    params: SimulationParams = field(default_factory=SimulationParams)
    sensitivity: float = 0.1

    def handle_key(self, key: str, pressed: bool) -> bool:
        """Apply a key event; return True when a simulation parameter changed.

        Digit keys choose the sensitivity. Letter keys adjust gravity, lengths,
        masses, step count and time step.
        """
        name = str(key).upper()
        change = 0.1 if pressed else 0.0
        params = self.params

        if name in _SENSITIVITY_KEYS:
            self.sensitivity = _SENSITIVITY_KEYS[name]
            logger.info("Sensitivity set to %s", self.sensitivity)
            return False

        if name in _NUDGE_KEYS:
            attribute, sign = _NUDGE_KEYS[name]
            setattr(params, attribute, getattr(params, attribute) + sign * change * self.sensitivity)
            if name == "G":
                logger.info("Gravity: %s", params.gravity)
        elif name == "T":
            params.time_steps += int(100.0 * self.sensitivity)
        elif name == "Y":
            params.time_steps = max(0, params.time_steps - int(100.0 * self.sensitivity))
        elif name == "D":
            params.dt += 0.001 * self.sensitivity
        elif name == "S":
            params.dt = max(params.dt - 0.001, 0.001) * self.sensitivity
        else:
            return False

        logger.info(
            "Updated params: gravity=%s, length1=%s, length2=%s, mass1=%s, mass2=%s, "
            "time_steps=%s, dt=%s",
            params.gravity,
            params.length1,
            params.length2,
            params.mass1,
            params.mass2,
            params.time_steps,
            params.dt,
        )
        return True