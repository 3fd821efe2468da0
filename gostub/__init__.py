"""Normalized Go interface signatures for stub and mock generation."""

from gostub.generator import collect_file, collect_source

__all__ = ["collect_file", "collect_source"]
__version__ = "0.1.0"
