"""A tile-map puzzle game played in the terminal: map validation, player movement and small text utilities."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "cli",
    "conversions",
    "errors",
    "game",
    "linereader",
    "mapcheck",
    "printf",
    "strings",
]