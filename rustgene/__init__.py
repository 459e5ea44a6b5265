"""Crossbreeding planner for Rust plant genes: seeds, search, report and CLI."""

__version__ = "0.1.0"

__all__ = ["__version__"]