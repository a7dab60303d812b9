"""Base class shared by every kind of robot in the simulation."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Robot(ABC):
    """A robot with a position, speed, heading in degrees and sensor range."""

    def __init__(
        self,
        robot_id: int,
        position: tuple[float, float],
        speed: float,
        orientation: float,
        sensor_range: float,
    ) -> None:
        self.id = robot_id
        x, y = position
        self.position: tuple[float, float] = (float(x), float(y))
        self.speed = float(speed)
        self.orientation = float(orientation)
        self.sensor_range = float(sensor_range)
        self._task_completed = False

    @property
    def task_completed(self) -> bool:
        """Whether the robot has finished its assigned task."""
        return self._task_completed

    @abstractmethod
    def handle_collision(self) -> None:
        """React to a detected collision."""

    @abstractmethod
    def rotate(self, angle: float) -> None:
        """Turn the robot by ``angle`` degrees."""

    @abstractmethod
    def move(self, max_width: float, max_height: float) -> None:
        """Advance one step inside a world of the given size."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, position={self.position!r}, "
            f"speed={self.speed!r}, orientation={self.orientation!r}, "
            f"sensor_range={self.sensor_range!r})"
        )