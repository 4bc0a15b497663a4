"""
CLI package for kgnode.
"""

from .main import cli

__all__ = ["cli"]
