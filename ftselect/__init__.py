"""Interactive terminal picker for command-line arguments, with its selection logic."""

__version__ = "0.1.0"