"""
aabb.py
-------
Axis-aligned bounding-box overlap tests.

Rectangles are (x, y, width, height) with the origin at the top-left, in
whatever shared space the caller uses. Touching edges do not overlap:
intersection must be positive on both axes.
"""


def rect_intersect(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """Return True if box A and box B share a positive-area region."""
    return (
        ax < bx + bw and
        ax + aw > bx and
        ay < by + bh and
        ay + ah > by
    )


def rects_overlap(a, b) -> bool:
    """Tuple form of rect_intersect: rects_overlap((x, y, w, h), (x, y, w, h))."""
    return rect_intersect(*a, *b)
