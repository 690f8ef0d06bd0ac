"""Convex hull analysis of the ship vertices."""

from typing import Dict, NamedTuple, Sequence, Tuple

import numpy as np
import structlog
from scipy.spatial import ConvexHull, QhullError

from ..utils.vector import Vector2
from ..errors import GeometryDegenerateError

logger = structlog.get_logger()


class HullAnalysis(NamedTuple):
    """Hull boundary and the vertices inside it."""
    hull: Tuple[int, ...]      # cyclic boundary in traversal order
    interior: Tuple[int, ...]  # ascending


def vertices_to_array(vertices: Sequence[Vector2]) -> np.ndarray:
    """Stack vertices into an (n, 2) float array."""
    return np.array([[v.x, v.y] for v in vertices], dtype=np.float64).reshape(-1, 2)


def check_degenerate(points: np.ndarray) -> None:
    """
    Raise GeometryDegenerateError unless the points span a 2D area.

    Fewer than three distinct points, or all points on one line, have no
    convex polygon to build a ship around.
    """
    distinct = np.unique(points, axis=0)
    if len(distinct) < 3:
        raise GeometryDegenerateError(
            f"Convex hull needs 3 distinct points, got {len(distinct)}"
        )
    offsets = distinct[1:] - distinct[0]
    if np.linalg.matrix_rank(offsets) < 2:
        raise GeometryDegenerateError("All vertices are collinear")


def analyze_hull(vertices: Sequence[Vector2]) -> HullAnalysis:
    """
    Compute the convex hull of the vertices.

    Hull points are mapped back to vertex indices by exact coordinate match
    (the first vertex holding the coordinates wins), keeping Qhull's
    counter-clockwise traversal order.

    Args:
        vertices: All ship vertices

    Returns:
        HullAnalysis with hull indices and interior indices
    """
    points = vertices_to_array(vertices)
    check_degenerate(points)

    try:
        qhull = ConvexHull(points)
    except QhullError as exc:
        raise GeometryDegenerateError(f"Convex hull failed: {exc}") from exc

    first_index: Dict[Tuple[float, float], int] = {}
    for i, vertex in enumerate(vertices):
        first_index.setdefault((vertex.x, vertex.y), i)

    hull = tuple(
        first_index[(float(points[i][0]), float(points[i][1]))]
        for i in qhull.vertices
    )
    on_hull = set(hull)
    interior = tuple(i for i in range(len(vertices)) if i not in on_hull)

    logger.info("Hull computed", hull=len(hull), interior=len(interior))
    return HullAnalysis(hull, interior)


def compute_polygon_centroid(polygon: Sequence[Vector2]) -> Vector2:
    """Compute the area centroid of a polygon.

    Args:
        polygon: Polygon corners in traversal order

    Returns:
        Centroid; the mean of the corners when the area vanishes
    """
    n = len(polygon)
    mean = Vector2(sum(p.x for p in polygon) / n, sum(p.y for p in polygon) / n)
    if n < 3:
        return mean

    # Shoelace formula
    area = 0.0
    cx = 0.0
    cy = 0.0
    for i in range(n):
        p = polygon[i]
        q = polygon[(i + 1) % n]
        a = p.x * q.y - q.x * p.y
        area += a
        cx += (p.x + q.x) * a
        cy += (p.y + q.y) * a

    if abs(area) < 1e-10:
        return mean

    area *= 0.5
    return Vector2(cx / (6.0 * area), cy / (6.0 * area))


def hull_centre(vertices: Sequence[Vector2], hull: Sequence[int]) -> Vector2:
    """Centroid of the hull polygon."""
    return compute_polygon_centroid([vertices[i] for i in hull])
