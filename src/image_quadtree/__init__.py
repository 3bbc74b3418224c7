"""
image-quadtree: Quadtree decomposition of square images in Python.

This package builds a quadtree over a square, power-of-two sized grid of
colors and answers hierarchical queries on it.

Available components:
- spatial: SpatialNode and QuadtreeIndex (build, collect, match, locate)
- color: Default aggregators and similarity predicates
- metrics: Structural inspection of built trees
- export: SVG rendering of node lists
"""

__version__ = "0.1.0"

# Default color collaborators
from .color import (
    argb_similarity,
    argb_to_hex,
    colors_equal,
    mean_argb_color,
    mean_color,
    pack_argb,
    unpack_argb,
)

# Inspection helpers
from .metrics import (
    check_tiling,
    compression_summary,
    iter_nodes,
    leaf_count,
    node_count,
    tree_depth,
)

# Spatial data structures
from .spatial import GridShapeWarning, MatchResult, QuadtreeIndex, SpatialNode
from .types import Color, ColorAverager, ColorPredicate, GridLike

# Validation utilities
from .validation import (
    InvalidIndexError,
    MalformedInputError,
    ValidationError,
    validate_grid,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Color",
    "GridLike",
    "ColorAverager",
    "ColorPredicate",
    # Spatial data structures
    "SpatialNode",
    "QuadtreeIndex",
    "MatchResult",
    "GridShapeWarning",
    # Colors
    "mean_color",
    "mean_argb_color",
    "colors_equal",
    "argb_similarity",
    "pack_argb",
    "unpack_argb",
    "argb_to_hex",
    # Metrics
    "iter_nodes",
    "node_count",
    "leaf_count",
    "tree_depth",
    "check_tiling",
    "compression_summary",
    # Validation
    "ValidationError",
    "MalformedInputError",
    "InvalidIndexError",
    "validate_grid",
]
