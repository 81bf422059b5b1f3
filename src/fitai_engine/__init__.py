"""fitai-engine: training routine generation and progressive overload suggestions."""

__version__ = "0.1.0"
