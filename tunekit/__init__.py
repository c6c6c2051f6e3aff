"""URI parsing, HTTP request descriptions and Material-style interface helpers."""

__version__ = "0.1.0"

__all__ = [
    "corner",
    "input_block",
    "request",
    "theme",
    "types",
    "uri",
    "wheel",
    "wheel_event",
]