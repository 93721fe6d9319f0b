"""Line-oriented text editor engine driven by an ed-style command language."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "errors",
    "host",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
