#!/usr/bin/env python3
"""
Visualization script for quadtree levels.

Builds an index over a generated image and writes one image per level plus
a side-by-side comparison into ./build/

Usage:
    uv run python scripts/visualize.py
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from image_quadtree import QuadtreeIndex, argb_similarity, mean_argb_color, pack_argb, unpack_argb
from image_quadtree.export import to_svg

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"


def ensure_build_dir():
    """Create build directory if it doesn't exist."""
    BUILD_DIR.mkdir(exist_ok=True)


def create_sample_image(size=64):
    """Radial gradient with a red disc, as packed ARGB."""
    ys, xs = np.mgrid[0:size, 0:size]
    center = (size - 1) / 2
    dist = np.hypot(xs - center, ys - center) / center

    image = np.zeros((size, size), dtype=np.int64)
    for y in range(size):
        for x in range(size):
            shade = int(255 * min(dist[y, x], 1.0))
            if dist[y, x] < 0.35:
                image[y, x] = pack_argb(255, 220, 30, 30)
            else:
                image[y, x] = pack_argb(255, shade, shade, 255 - shade)
    return image


def visualize(nodes, title="Quadtree", ax=None):
    """Draw nodes as filled squares on an axis."""
    for node in nodes:
        _, r, g, b = unpack_argb(node.color)
        ax.add_patch(
            Rectangle(
                (node.x, node.y),
                node.size,
                node.size,
                facecolor=(r / 255, g / 255, b / 255),
                edgecolor="white",
                linewidth=0.3,
            )
        )

    extent = max(n.x + n.size for n in nodes)
    ax.set_xlim(0, extent)
    ax.set_ylim(extent, 0)
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_aspect("equal")
    ax.axis("off")


def save_level(index, level, filename):
    """Generate and save a single level image."""
    nodes = index.collect_at_level(index.root, level)

    fig, ax = plt.subplots(figsize=(8, 8))
    visualize(nodes, f"Level {level} ({len(nodes)} nodes)", ax=ax)
    plt.tight_layout()

    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def save_comparison(index, filename, title):
    """Generate and save all levels side by side."""
    n = index.depth + 1
    cols = min(n, 4)
    rows = (n + cols - 1) // cols

    fig, axes = plt.subplots(rows, cols, figsize=(5 * cols, 5 * rows))
    axes = axes.flatten() if hasattr(axes, "flatten") else [axes]

    for level in range(n):
        nodes = index.collect_at_level(index.root, level)
        visualize(nodes, f"Level {level}", ax=axes[level])

    # Hide unused subplots
    for j in range(n, len(axes)):
        axes[j].axis("off")

    fig.suptitle(title, fontsize=14, fontweight="bold")
    plt.tight_layout()

    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def generate_all():
    """Generate all visualization images."""
    ensure_build_dir()

    index = QuadtreeIndex(
        create_sample_image(),
        average_color=mean_argb_color,
        similar_color=argb_similarity(24),
    )

    print("Generating individual level images...")
    for level in range(index.depth + 1):
        save_level(index, level, f"level_{level}.png")

    print("Generating comparison image...")
    save_comparison(index, "comparison_levels.png", "Quadtree Levels")

    print("Generating match export...")
    match = index.find_matching(index.root, pack_argb(255, 220, 30, 30), 4)
    filepath = BUILD_DIR / "matches_level_4.svg"
    filepath.write_text(to_svg(match.nodes, scale=8, stroke="#ffffff"))
    print(f"  Saved: {filepath} ({match.count} nodes)")

    print(f"\nDone! Images saved to {BUILD_DIR}/")


if __name__ == "__main__":
    generate_all()
