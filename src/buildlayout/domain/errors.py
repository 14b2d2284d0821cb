"""Error raised for invalid layout configuration."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid project name, repository URL, output root, or ordering graph.

    Raised synchronously at construction or path-computation time. Callers
    should abort rather than retry.
    """
