"""Pendulum controller: the host side of the simulation, free of Qt.

Owns one PendulumModel and the last-known pointer state. The Qt view
drives it from a frame timer and widget events; tests drive it with
scripted events.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from simulation import PendulumModel, Readouts, RenderSnapshot, Vector2

logger = logging.getLogger(__name__)

READOUT_OFFSETS = (0.0, 30.0, 60.0, 90.0, 120.0)


class Action(enum.Enum):
    """Discrete keyboard actions. Values are the adjustment step sizes."""

    GRAVITY_UP = ("g", 0.1)
    GRAVITY_DOWN = ("g", -0.1)
    MASS_DOWN = ("m", -1.0)
    MASS_UP = ("m", 1.0)
    RESET = ("reset", 0.0)


@dataclass
class InputState:
    """Last pointer position and a copy of the grab flag."""

    pointer_x: float = 0.0
    pointer_y: float = 0.0
    grabbed: bool = False

    @property
    def pointer(self) -> Vector2:
        return Vector2(self.pointer_x, self.pointer_y)


def readout_lines(readouts: Readouts) -> list[str]:
    """Format the readouts as the five labelled on-screen lines."""
    return [
        f"Gravity: {readouts.gravity:.2f}",
        f"Angle: {readouts.angle:.2f}",
        f"Acceleration: {readouts.acceleration_x10:.2f}",
        f"Velocity: {readouts.velocity:.2f}",
        f"Mass: {readouts.mass:.2f}",
    ]


class PendulumController:
    """Routes frame ticks and input events into a PendulumModel.

    Events are applied synchronously in arrival order; only the latest
    pointer position matters at the next frame.
    """

    def __init__(self, model: PendulumModel, input_state: InputState | None = None):
        self.model = model
        self.input = input_state if input_state is not None else InputState()

    @classmethod
    def from_config(cls, config) -> PendulumController:
        """Build a controller and its model from an AppConfig."""
        model = PendulumModel(
            config.origin_x, config.origin_y, config.radius,
            m=config.mass, g=config.gravity,
            strict=config.strict, min_radius=config.min_radius,
        )
        return cls(model)

    # -- Frame --

    def on_frame(self) -> RenderSnapshot:
        if self.input.grabbed:
            self.model.update_grab(self.input.pointer)
        else:
            self.model.step()
        return self.model.snapshot()

    # -- Pointer --

    def on_pointer_move(self, x: float, y: float) -> None:
        self.input.pointer_x = x
        self.input.pointer_y = y

    def on_pointer_down(self) -> bool:
        """Primary button pressed. Returns True if the bob was grabbed."""
        pointer = self.input.pointer
        if not self.model.hit_test(pointer):
            return False
        self.model.begin_grab(pointer)
        self.input.grabbed = True
        logger.debug("Grabbed bob at (%.1f, %.1f)", pointer.x, pointer.y)
        return True

    def on_pointer_up(self) -> bool:
        """Primary button released. Returns True if the bob was let go.

        A release away from the bob keeps the grab; the bob catches up
        with the pointer on the next frame.
        """
        pointer = self.input.pointer
        if not self.model.hit_test(pointer):
            return False
        self.model.end_grab()
        self.input.grabbed = False
        logger.debug(
            "Released bob at angle=%.3f r=%.1f", self.model.angle, self.model.r
        )
        return True

    # -- Keys --

    def on_key(self, action: Action | None) -> bool:
        """Apply a keyboard action. Unmapped keys arrive as None and are ignored."""
        if action is None:
            return False

        target, delta = action.value
        if target == "g":
            self.model.adjust_gravity(delta)
        elif target == "m":
            self.model.adjust_mass(delta)
        else:
            self.model.reset()

        logger.debug(
            "%s -> g=%.2f m=%.2f", action.name, self.model.g, self.model.m
        )
        return True
