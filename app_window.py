"""App window: QMainWindow hosting the pendulum view."""

import logging

from PyQt6.QtWidgets import QMainWindow

from pendulum.view import PendulumView

logger = logging.getLogger(__name__)


class AppWindow(QMainWindow):
    """Top-level window sized and titled from an AppConfig."""

    def __init__(self, config):
        super().__init__()
        self.config = config
        self.setWindowTitle(config.title)
        self.resize(config.width, config.height)

        self.pendulum_view = PendulumView(config)
        self.setCentralWidget(self.pendulum_view)

        if config.strict:
            logger.info("Strict numerics enabled")

    def showEvent(self, event):
        super().showEvent(event)
        if not self.pendulum_view.timer.isActive():
            self.pendulum_view.start()

    def closeEvent(self, event):
        self.pendulum_view.stop()
        super().closeEvent(event)
