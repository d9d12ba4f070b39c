"""API module for SIR tools.

Command functions defined here return a StageResult and serve as the single
source of truth for the CLI; the plain functions and classes beside them are
the importable library surface.
"""

__all__ = []
