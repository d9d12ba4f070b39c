"""Collision-free naming for new image files."""

from .resolve_available_path import SuffixMode, resolve_available_path

__all__ = ["SuffixMode", "resolve_available_path"]
