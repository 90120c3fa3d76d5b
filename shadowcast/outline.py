import math

import pygame


def polar_angle(point, observer):
    """atan2 angle of point around observer, in (-pi, pi]."""
    return math.atan2(point[1] - observer[1], point[0] - observer[0])


def assemble(points, observer):
    """Sort points by polar angle around observer into a closed outline.

    The sort is stable so points sharing an angle keep their insertion
    order. Duplicates are kept.
    """
    observer = pygame.Vector2(observer)
    return sorted(
        (pygame.Vector2(p) for p in points),
        key=lambda p: polar_angle(p, observer),
    )


def outline_segments(outline):
    """(a, b) pairs linking consecutive outline points, last back to first."""
    count = len(outline)
    return [(outline[i], outline[(i + 1) % count]) for i in range(count)]


def point_in_polygon(x, y, polygon):
    """Even-odd test of (x, y) against a closed outline.

    polygon is an outline as returned by assemble(): the last point joins the
    first, so no closing vertex is repeated. Points on an edge may land
    either side.
    """
    inside = False
    for (ax, ay), (bx, by) in outline_segments(polygon):
        if (ay > y) == (by > y):
            continue
        crossing_x = ax + (bx - ax) * (y - ay) / (by - ay)
        if x < crossing_x:
            inside = not inside
    return inside
