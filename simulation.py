"""Single pendulum physics engine.

Advances the pendulum one frame at a time with a semi-implicit Euler step
and a mass-dependent damping factor. Units are screen pixels and frames,
with constants tuned for visual plausibility rather than SI accuracy.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

# Visual radius of the bob; also the hit-test distance
BOB_RADIUS = 28.0
BOB_INNER_RADIUS = 25.0

RESET_RADIUS = 200.0
RESET_ANGLE = 1.0

DEFAULT_MASS = 1.0
DEFAULT_GRAVITY = 0.5


def damping_factor(m):
    """Per-frame multiplicative decay of angular velocity for mass m.

    Heavier bobs lose more velocity per frame. Always < 1 for m >= 0.
    """
    return 0.995 - 0.0003 * m / 3.0


# ---------------------------------------------------------------------------
# Vector2
# ---------------------------------------------------------------------------

@dataclass
class Vector2:
    """Mutable 2D float vector. add/sub mutate in place and return self."""

    x: float = 0.0
    y: float = 0.0

    def set(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def add(self, other: Vector2) -> Vector2:
        self.x += other.x
        self.y += other.y
        return self

    def sub(self, other: Vector2) -> Vector2:
        self.x -= other.x
        self.y -= other.y
        return self

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# ---------------------------------------------------------------------------
# Snapshot types
# ---------------------------------------------------------------------------

class Readouts(NamedTuple):
    """The five numeric values shown in the on-screen readout."""

    gravity: float
    angle: float
    acceleration_x10: float
    velocity: float
    mass: float


class RenderSnapshot(NamedTuple):
    """Everything the canvas needs to draw one frame."""

    origin: tuple[float, float]
    bob: tuple[float, float]
    radius: float
    grabbed: bool
    readouts: Readouts


# ---------------------------------------------------------------------------
# PendulumModel
# ---------------------------------------------------------------------------

class PendulumModel:
    """Pendulum state plus the free-swinging / grabbed interaction mode.

    The pivot is fixed at construction. ``position`` is derived from
    ``origin``, ``r`` and ``angle`` after every step() and update_grab().

    Degenerate numerics (r == 0, runaway gravity or mass) propagate as
    inf/NaN by default. With ``strict=True`` numpy floating-point errors
    raise FloatingPointError instead, as does a non-finite state after a
    step. ``min_radius`` optionally clamps the arm length while dragging.
    """

    def __init__(self, x, y, r, m=DEFAULT_MASS, g=DEFAULT_GRAVITY,
                 strict=False, min_radius=None):
        self.origin = Vector2(x, y)
        self.position = Vector2(0.0, 0.0)
        self.angle = RESET_ANGLE
        self.angular_velocity = 0.0
        self.angular_acceleration = 0.0
        self.r = r
        self.m = m
        self.g = g
        self.grabbed = False
        self.strict = strict
        self.min_radius = min_radius

        self._initial = (r, m, g)
        self._place_bob()

    # -- Physics --

    def _errstate(self):
        if self.strict:
            return np.errstate(divide="raise", invalid="raise", over="raise")
        return np.errstate(divide="ignore", invalid="ignore", over="ignore")

    def _place_bob(self):
        """position = origin + r * (sin(angle), cos(angle))"""
        with self._errstate():
            r = np.float64(self.r)
            self.position.set(float(r * np.sin(self.angle)),
                              float(r * np.cos(self.angle)))
        self.position.add(self.origin)

    def step(self) -> None:
        """Advance one frame. Does nothing while grabbed."""
        if self.grabbed:
            return

        damping = damping_factor(self.m)

        with self._errstate():
            alpha = -np.float64(self.g) * np.sin(self.angle) / np.float64(self.r)
            omega = (self.angular_velocity + alpha) * damping
            theta = self.angle + omega

        self.angular_acceleration = float(alpha)
        self.angular_velocity = float(omega)
        self.angle = float(theta)
        self._place_bob()

        if self.strict:
            self._check_finite()

    def _check_finite(self):
        for name in ("angle", "angular_velocity", "angular_acceleration"):
            value = getattr(self, name)
            if not np.isfinite(value):
                raise FloatingPointError(f"Pendulum {name} is not finite: {value}")

    def is_finite(self) -> bool:
        """True if angle, velocities and position are all finite."""
        return bool(np.all(np.isfinite([
            self.angle, self.angular_velocity, self.angular_acceleration,
            self.position.x, self.position.y,
        ])))

    # -- Interaction --

    def distance(self, point: Vector2) -> float:
        """Euclidean distance from the bob to point."""
        return self.position.distance_to(point)

    def hit_test(self, point: Vector2) -> bool:
        return self.distance(point) < BOB_RADIUS

    def begin_grab(self, pointer: Vector2) -> None:
        """Enter grab mode. Callers check hit_test(pointer) first."""
        self.grabbed = True

    def update_grab(self, pointer: Vector2) -> None:
        """Snap the bob to the pointer and re-derive r and angle from it.

        Velocity and acceleration are held at zero so that releasing
        resumes swinging from rest at the dragged angle.
        """
        diff = self.origin.copy().sub(pointer)

        self.position.set(pointer.x, pointer.y)
        self.r = self.origin.distance_to(pointer)
        self.angular_acceleration = 0.0
        self.angular_velocity = 0.0
        self.angle = math.atan2(-diff.y, diff.x) - math.pi / 2

        if self.min_radius is not None and self.r < self.min_radius:
            self.r = self.min_radius
            self._place_bob()

    def end_grab(self) -> None:
        self.grabbed = False
        self.angular_velocity = 0.0

    # -- Parameter adjustments --

    def adjust_gravity(self, delta: float) -> None:
        self.g += delta

    def adjust_mass(self, delta: float) -> None:
        self.m += delta

    def reset(self) -> None:
        """Put the arm back to its default length and angle.

        Velocity, acceleration, mass and gravity are left untouched; the
        bob is re-placed on the next step().
        """
        self.r = RESET_RADIUS
        self.angle = RESET_ANGLE

    def full_reset(self) -> None:
        """Restore every field to its construction value."""
        self.r, self.m, self.g = self._initial
        self.angle = RESET_ANGLE
        self.angular_velocity = 0.0
        self.angular_acceleration = 0.0
        self.grabbed = False
        self._place_bob()

    # -- Rendering --

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            origin=self.origin.as_tuple(),
            bob=self.position.as_tuple(),
            radius=self.r,
            grabbed=self.grabbed,
            readouts=Readouts(
                gravity=self.g,
                angle=self.angle,
                acceleration_x10=self.angular_acceleration * 10.0,
                velocity=self.angular_velocity,
                mass=self.m,
            ),
        )
