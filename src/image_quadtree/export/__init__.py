"""
Export functionality for quadtrees.

- SVG: draw a list of nodes as colored squares

Example usage:
    from image_quadtree import QuadtreeIndex, mean_argb_color
    from image_quadtree.export import to_svg

    index = QuadtreeIndex(pixels, average_color=mean_argb_color)
    svg_content = to_svg(index.collect_at_level(index.root, 3), scale=4)
    with open("level3.svg", "w") as f:
        f.write(svg_content)
"""

from .svg import to_svg

__all__ = ["to_svg"]
