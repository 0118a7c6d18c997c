"""Client-side fetch pipeline with classified API errors."""

__version__ = "0.1.0"
