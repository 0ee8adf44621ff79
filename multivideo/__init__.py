"""Play up to four video files side by side in a grid with shared controls."""

__version__ = "0.1.0"

__all__ = ["__version__"]