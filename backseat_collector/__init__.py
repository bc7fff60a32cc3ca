"""Drone simulation in which brain modules read their drones through a small host API."""

__version__ = "0.1.0"