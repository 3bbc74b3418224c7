"""
Spatial data structures for hierarchical image decomposition.

Provides the quadtree node and the index that builds and queries it.
"""

from .node import SpatialNode
from .quadtree import GridShapeWarning, MatchResult, QuadtreeIndex

__all__ = ["GridShapeWarning", "MatchResult", "QuadtreeIndex", "SpatialNode"]
