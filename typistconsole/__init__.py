"""Terminal typing tutor with random lessons and speed and accuracy results."""

__version__ = "0.1.0"