"""ghvis: list GitHub repositories and switch their visibility."""

__version__ = "0.1.0"
