"""Pendulum canvas: QPainter rendering and input forwarding.

Draws the latest RenderSnapshot (arm, two-tone bob, readouts) and turns
Qt mouse and key events into PendulumController calls.
"""

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPainter, QPen, QBrush, QColor, QFont
from PyQt6.QtWidgets import QWidget

from simulation import BOB_RADIUS, BOB_INNER_RADIUS
from pendulum.controller import Action, READOUT_OFFSETS, readout_lines

KEY_ACTIONS = {
    Qt.Key.Key_Up: Action.GRAVITY_UP,
    Qt.Key.Key_Down: Action.GRAVITY_DOWN,
    Qt.Key.Key_Left: Action.MASS_DOWN,
    Qt.Key.Key_Right: Action.MASS_UP,
    Qt.Key.Key_R: Action.RESET,
}

BACKGROUND = QColor.fromRgbF(0.8, 0.9, 1.0)
ARM_COLOR = QColor(128, 128, 128)
BOB_OUTER_COLOR = QColor(64, 64, 64)
BOB_INNER_COLOR = QColor(192, 192, 192)
TEXT_COLOR = QColor(0, 0, 0)


class PendulumCanvas(QWidget):
    """Custom widget that draws the pendulum using QPainter."""

    FONT_PIXEL_SIZE = 30

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.snapshot = controller.model.snapshot()
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(400, 240)

    def set_snapshot(self, snapshot):
        """Store the frame to draw and schedule a repaint."""
        self.snapshot = snapshot
        self.update()

    # -- Input --

    def mouseMoveEvent(self, event):
        pos = event.position()
        self.controller.on_pointer_move(pos.x(), pos.y())

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.on_pointer_down()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.on_pointer_up()

    def keyPressEvent(self, event):
        if not self.controller.on_key(KEY_ACTIONS.get(event.key())):
            super().keyPressEvent(event)

    # -- Painting --

    def _draw_readouts(self, painter):
        font = QFont()
        font.setPixelSize(self.FONT_PIXEL_SIZE)
        painter.setFont(font)
        painter.setPen(TEXT_COLOR)
        line_height = self.FONT_PIXEL_SIZE
        # drawText(QPointF) places the baseline, not the top edge
        for y, text in zip(READOUT_OFFSETS, readout_lines(self.snapshot.readouts)):
            painter.drawText(QPointF(0, y + line_height), text)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.fillRect(self.rect(), BACKGROUND)

        origin = QPointF(*self.snapshot.origin)
        bob = QPointF(*self.snapshot.bob)

        # Arm
        arm_pen = QPen(ARM_COLOR)
        arm_pen.setWidthF(3.0)
        painter.setPen(arm_pen)
        painter.drawLine(origin, bob)

        self._draw_readouts(painter)

        # Bob
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(BOB_OUTER_COLOR))
        painter.drawEllipse(bob, BOB_RADIUS, BOB_RADIUS)
        painter.setBrush(QBrush(BOB_INNER_COLOR))
        painter.drawEllipse(bob, BOB_INNER_RADIUS, BOB_INNER_RADIUS)

        painter.end()
