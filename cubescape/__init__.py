"""First-person maze game core: .cub scene parsing, XPM images, an event-loop model and game logic."""

__version__ = "0.1.0"