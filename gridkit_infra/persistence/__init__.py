"""Persistence adapters for geometry save states.

This module provides the infrastructure layer implementation of the
StateRepository port, storing Points and Directions as JSON.
"""

from .json_adapter import JsonStateAdapter

__all__ = ["JsonStateAdapter"]
