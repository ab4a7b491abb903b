"""Core utilities shared across syntax and serialization.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    depth_clamp: Clamp a depth against the Python recursion limit

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp

__all__ = ["DepthGuard", "depth_clamp"]
