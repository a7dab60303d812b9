"""Two-dimensional simulation of autonomous and remote-controlled robots among square obstacles."""

__version__ = "1.0.0"