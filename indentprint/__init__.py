"""Column-tracking buffers, formatting helpers, a margin-aware pretty printer and time formatting."""

__version__ = "1.0.0"

__all__ = ["streambuf", "printing", "ppconfig", "pretty", "timeutil"]