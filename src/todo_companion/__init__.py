"""To-do task core: registry, service and wiring."""

__version__ = "0.1.0"
