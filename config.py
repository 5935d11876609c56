"""Application configuration: window, pendulum defaults, and numerics mode."""

from __future__ import annotations

from dataclasses import dataclass

from simulation import DEFAULT_GRAVITY, DEFAULT_MASS, RESET_RADIUS


@dataclass(frozen=True)
class AppConfig:
    """Settings for one run of the application.

    Defaults reproduce the classic 800x480 window with the pivot at the
    top centre. ``strict`` turns degenerate numerics into errors and
    ``min_radius`` clamps the arm length while the bob is dragged.
    """

    title: str = "Pendulum"
    width: int = 800
    height: int = 480

    origin_x: float = 400.0
    origin_y: float = 0.0
    radius: float = RESET_RADIUS
    mass: float = DEFAULT_MASS
    gravity: float = DEFAULT_GRAVITY

    fps: int = 60
    strict: bool = False
    min_radius: float | None = None

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Window size must be positive, got {self.width}x{self.height}"
            )
        if self.min_radius is not None and self.min_radius < 0:
            raise ValueError(f"min_radius must be >= 0, got {self.min_radius}")

    @property
    def frame_interval_ms(self) -> int:
        """QTimer interval for one frame."""
        return max(1, int(1000 / self.fps))
