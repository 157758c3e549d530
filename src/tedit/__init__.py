"""Line-oriented text buffer core for a terminal editor."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "editor",
    "runtime",
]

__version__ = "0.1.0"
