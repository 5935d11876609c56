"""Tests for pendulum/controller.py: scripted host events (no Qt widgets needed)."""

import math

import pytest

from config import AppConfig
from simulation import PendulumModel, Readouts
from pendulum.controller import (
    Action, InputState, PendulumController, READOUT_OFFSETS, readout_lines,
)


@pytest.fixture
def controller():
    return PendulumController(PendulumModel(400.0, 0.0, 200.0))


def move_to_bob(controller):
    x, y = controller.model.position.as_tuple()
    controller.on_pointer_move(x, y)


class TestFrame:
    """on_frame advances physics or follows the pointer."""

    def test_free_frame_steps(self, controller):
        snap = controller.on_frame()
        assert controller.model.angle < 1.0
        assert snap.bob == controller.model.position.as_tuple()
        assert snap.grabbed is False

    def test_frames_match_direct_steps(self, controller):
        reference = PendulumModel(400.0, 0.0, 200.0)
        for _ in range(50):
            snap = controller.on_frame()
            reference.step()
        assert snap.readouts.angle == reference.angle
        assert snap.bob == reference.position.as_tuple()

    def test_pointer_move_does_not_touch_model(self, controller):
        before = controller.model.snapshot()
        controller.on_pointer_move(10.0, 20.0)
        assert controller.model.snapshot() == before
        assert (controller.input.pointer_x, controller.input.pointer_y) == (10.0, 20.0)


class TestGrabScenario:
    """Press on the bob, drag, release."""

    def test_press_away_from_bob_does_nothing(self, controller):
        controller.on_pointer_move(0.0, 0.0)
        assert controller.on_pointer_down() is False
        assert not controller.input.grabbed
        assert not controller.model.grabbed

    def test_grab_drag_release(self, controller):
        move_to_bob(controller)
        assert controller.on_pointer_down() is True
        assert controller.model.grabbed and controller.input.grabbed

        controller.on_pointer_move(400.0, 200.0)
        snap = controller.on_frame()
        assert snap.bob == (400.0, 200.0)
        assert snap.radius == pytest.approx(200.0)
        assert snap.readouts.angle == pytest.approx(0.0, abs=1e-12)
        assert snap.readouts.velocity == 0.0
        assert snap.readouts.acceleration_x10 == 0.0
        assert snap.grabbed is True

        assert controller.on_pointer_up() is True
        assert not controller.model.grabbed and not controller.input.grabbed

        # Released hanging straight down: stays put
        snap = controller.on_frame()
        assert snap.bob == pytest.approx((400.0, 200.0))

    def test_drag_stretches_arm(self, controller):
        move_to_bob(controller)
        controller.on_pointer_down()
        controller.on_pointer_move(400.0, 350.0)
        controller.on_frame()
        assert controller.model.r == pytest.approx(350.0)

    def test_last_pointer_move_wins(self, controller):
        move_to_bob(controller)
        controller.on_pointer_down()
        controller.on_pointer_move(300.0, 100.0)
        controller.on_pointer_move(310.0, 120.0)
        controller.on_pointer_move(500.0, 150.0)
        snap = controller.on_frame()
        assert snap.bob == (500.0, 150.0)

    def test_release_away_from_bob_keeps_grab(self, controller):
        move_to_bob(controller)
        controller.on_pointer_down()
        controller.on_pointer_move(100.0, 100.0)
        # Bob has not caught up with the pointer yet
        assert controller.on_pointer_up() is False
        assert controller.model.grabbed

        controller.on_frame()
        assert controller.on_pointer_up() is True
        assert not controller.model.grabbed

    def test_release_swings_from_rest(self, controller):
        move_to_bob(controller)
        controller.on_pointer_down()
        controller.on_pointer_move(600.0, 100.0)
        controller.on_frame()
        angle = controller.model.angle
        controller.on_pointer_up()

        snap = controller.on_frame()
        r = math.hypot(200.0, 100.0)
        alpha = -0.5 * math.sin(angle) / r
        assert snap.readouts.acceleration_x10 == pytest.approx(alpha * 10.0)
        assert snap.readouts.angle < angle


class TestKeys:
    """Keyboard actions."""

    def test_unmapped_key_ignored(self, controller):
        before = controller.model.snapshot()
        assert controller.on_key(None) is False
        assert controller.model.snapshot() == before

    @pytest.mark.parametrize("action, g, m", [
        (Action.GRAVITY_UP, 0.6, 1.0),
        (Action.GRAVITY_DOWN, 0.4, 1.0),
        (Action.MASS_UP, 0.5, 2.0),
        (Action.MASS_DOWN, 0.5, 0.0),
    ])
    def test_adjustments(self, controller, action, g, m):
        assert controller.on_key(action) is True
        assert controller.model.g == pytest.approx(g)
        assert controller.model.m == pytest.approx(m)

    def test_reset(self, controller):
        move_to_bob(controller)
        controller.on_pointer_down()
        controller.on_pointer_move(700.0, 300.0)
        controller.on_frame()
        controller.on_pointer_up()

        controller.on_key(Action.RESET)
        assert controller.model.r == 200.0
        assert controller.model.angle == 1.0

    def test_gravity_steps_accumulate(self, controller):
        for _ in range(3):
            controller.on_key(Action.GRAVITY_UP)
        assert controller.model.g == pytest.approx(0.8)


class TestReadoutLines:
    """On-screen text formatting."""

    def test_labels_and_precision(self):
        lines = readout_lines(Readouts(
            gravity=0.5, angle=1.0, acceleration_x10=-0.021037,
            velocity=-0.00209, mass=1.0,
        ))
        assert lines == [
            "Gravity: 0.50",
            "Angle: 1.00",
            "Acceleration: -0.02",
            "Velocity: -0.00",
            "Mass: 1.00",
        ]

    def test_one_offset_per_line(self):
        lines = readout_lines(Readouts(0.0, 0.0, 0.0, 0.0, 0.0))
        assert len(lines) == len(READOUT_OFFSETS)
        assert READOUT_OFFSETS == (0.0, 30.0, 60.0, 90.0, 120.0)


class TestFromConfig:
    """Building the controller from AppConfig."""

    def test_defaults(self):
        controller = PendulumController.from_config(AppConfig())
        model = controller.model
        assert model.origin.as_tuple() == (400.0, 0.0)
        assert (model.r, model.m, model.g) == (200.0, 1.0, 0.5)
        assert model.strict is False
        assert model.min_radius is None
        assert controller.input == InputState()

    def test_numerics_options(self):
        controller = PendulumController.from_config(
            AppConfig(strict=True, min_radius=30.0)
        )
        assert controller.model.strict is True
        assert controller.model.min_radius == 30.0
