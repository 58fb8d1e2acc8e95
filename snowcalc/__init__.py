"""Series-based trigonometric functions, a keypad state machine and a text menu calculator."""

__version__ = "0.1.0"
__all__ = ["series", "snow", "keypad", "cli"]