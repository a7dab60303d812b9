"""Square obstacles placed in the simulated world."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from robosim.geometry import Rect

logger = logging.getLogger(__name__)


@dataclass
class Obstacle:
    """A square obstacle of side ``size`` centred on ``position``."""

    id: int
    position: tuple[float, float]
    size: float

    def __post_init__(self) -> None:
        x, y = self.position
        self.position = (float(x), float(y))
        logger.info(
            "Obstacle created with ID: %s, at (%s, %s) with size %s",
            self.id,
            x,
            y,
            self.size,
        )

    @property
    def bounds(self) -> Rect:
        """The square occupied by the obstacle."""
        x, y = self.position
        return Rect.square(x, y, self.size)