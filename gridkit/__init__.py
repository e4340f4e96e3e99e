"""gridkit Domain Layer.

This package contains the grid geometry kernel organized by bounded context:
- geometry: Compass directions, integer points, line and circle rasterization
"""

from gridkit import geometry

__all__ = ["geometry"]
