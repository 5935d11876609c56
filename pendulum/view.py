"""Pendulum view: frame timer wiring between controller and canvas.

This is a QWidget suitable for embedding as a main window's central widget.
"""

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QWidget, QVBoxLayout

from pendulum.canvas import PendulumCanvas
from pendulum.controller import PendulumController

logger = logging.getLogger(__name__)


class PendulumView(QWidget):
    """Complete pendulum mode: controller + canvas + frame timer."""

    def __init__(self, config, parent=None):
        super().__init__(parent)
        self.config = config

        self.controller = PendulumController.from_config(config)
        self.canvas = PendulumCanvas(self.controller)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.canvas)

        self._warned_non_finite = False

        # Timer
        self.timer = QTimer()
        self.timer.setInterval(config.frame_interval_ms)
        self.timer.timeout.connect(self._on_timer)

    @property
    def model(self):
        return self.controller.model

    def start(self):
        self.canvas.setFocus()
        self.timer.start()
        logger.info("Frame timer started at %d fps", self.config.fps)

    def stop(self):
        self.timer.stop()

    def _on_timer(self):
        try:
            snapshot = self.controller.on_frame()
        except FloatingPointError:
            self.stop()
            logger.exception("Simulation stopped on degenerate state")
            return

        if not self._warned_non_finite and not self.model.is_finite():
            self._warned_non_finite = True
            logger.warning(
                "Pendulum state is no longer finite (r=%s, g=%s, m=%s)",
                self.model.r, self.model.g, self.model.m,
            )

        self.canvas.set_snapshot(snapshot)
