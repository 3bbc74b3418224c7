"""
SVG export for quadtree nodes.

Renders a list of nodes (typically the output of collect_at_level or
find_matching) as filled squares, one per node, in grid coordinates scaled
by a constant factor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Sequence
from xml.sax.saxutils import escape

from ..color import argb_to_hex

if TYPE_CHECKING:
    from ..spatial.node import SpatialNode
    from ..types import Color


def to_svg(
    nodes: Sequence[SpatialNode],
    *,
    color_to_fill: Callable[[Color], str] = argb_to_hex,
    stroke: Optional[str] = None,
    stroke_width: float = 0.5,
    scale: float = 1.0,
    background: Optional[str] = None,
) -> str:
    """
    Export quadtree nodes to SVG format.

    Args:
        nodes: Nodes to draw, back to front
        color_to_fill: Maps a node color to an SVG fill (default packed ARGB to #rrggbb)
        stroke: Outline color for each square (default None for no outline)
        stroke_width: Outline width (default 0.5)
        scale: Pixels per grid cell (default 1)
        background: Background color (default None for transparent)

    Returns:
        SVG string representation of the nodes
    """
    if not nodes:
        return _empty_svg(0, 0, background)

    # Bounding box in grid space
    min_x = min(n.x for n in nodes)
    min_y = min(n.y for n in nodes)
    max_x = max(n.x + n.size for n in nodes)
    max_y = max(n.y + n.size for n in nodes)

    width = (max_x - min_x) * scale
    height = (max_y - min_y) * scale

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    svg_parts.append('  <g class="nodes">')
    for node in nodes:
        svg_parts.append(
            _render_node(node, min_x, min_y, scale, color_to_fill, stroke, stroke_width)
        )
    svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _empty_svg(width: float, height: float, background: Optional[str]) -> str:
    """Create an empty SVG."""
    bg = ""
    if background:
        bg = f'\n  <rect width="100%" height="100%" fill="{escape(background)}"/>'
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">{bg}\n</svg>'
    )


def _render_node(
    node: SpatialNode,
    origin_x: int,
    origin_y: int,
    scale: float,
    color_to_fill: Callable[[Color], str],
    stroke: Optional[str],
    stroke_width: float,
) -> str:
    """Render a single node as a rect."""
    x = (node.x - origin_x) * scale
    y = (node.y - origin_y) * scale
    side = node.size * scale
    fill = escape(color_to_fill(node.color))

    outline = ""
    if stroke:
        outline = f' stroke="{escape(stroke)}" stroke-width="{stroke_width}"'

    return (
        f'    <rect x="{x:.1f}" y="{y:.1f}" width="{side:.1f}" height="{side:.1f}" '
        f'fill="{fill}"{outline}/>'
    )


__all__ = ["to_svg"]
