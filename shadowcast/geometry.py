import math

import pygame

from shadowcast.errors import DegenerateOccluder

MIN_VERTICES = 3
MAX_VERTICES = 8

# Cross products smaller than this count as "no turn" (collinear vertices)
TURN_TOLERANCE = 1e-9


def cross(a, b):
    """2-D cross product (z component of a x b)."""
    return a.x * b.y - a.y * b.x


def polygon_edges(points):
    """Yield (a, b) for every edge of a closed polygon, last vertex wrapping to the first."""
    count = len(points)
    for i in range(count):
        yield points[i], points[(i + 1) % count]


def is_convex(points):
    """True if the polygon turns the same way at every non-collinear vertex.

    Either winding is accepted. A polygon whose vertices are all collinear
    has no area and is not convex.
    """
    sign = 0
    count = len(points)
    for i in range(count):
        a = points[i]
        b = points[(i + 1) % count]
        c = points[(i + 2) % count]
        turn = cross(b - a, c - b)
        if abs(turn) <= TURN_TOLERANCE:
            continue
        current = 1 if turn > 0 else -1
        if sign == 0:
            sign = current
        elif current != sign:
            return False
    if sign == 0:
        return False

    # Same-signed turns can still wind around more than once (a pentagram).
    total = 0.0
    for i in range(count):
        a = points[i]
        b = points[(i + 1) % count]
        c = points[(i + 2) % count]
        e1 = b - a
        e2 = c - b
        if e1.length_squared() == 0 or e2.length_squared() == 0:
            continue
        total += math.atan2(cross(e1, e2), e1.dot(e2))
    return abs(total) < 2 * math.pi + 1e-6


class Pose:
    """Position and rotation of an occluder.

    scale is carried for the visuals only; occlusion always treats it as 1.
    """

    def __init__(self, position=(0, 0), rotation=0.0, scale=1.0):
        self.position = pygame.Vector2(position)
        self.rotation = float(rotation)
        self.scale = float(scale)

    def __repr__(self):
        return (f"Pose(position=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"rotation={self.rotation:.3f}, scale={self.scale:.2f})")


class ConvexPolygon:
    """Validated local-space vertices of an occluder (insertion order = winding)."""

    def __init__(self, points):
        if isinstance(points, (str, bytes)) or not hasattr(points, "__iter__"):
            raise DegenerateOccluder(f"expected a sequence of vertices, got {points!r}")

        pts = []
        for p in points:
            try:
                pts.append(pygame.Vector2(p))
            except (TypeError, ValueError):
                raise DegenerateOccluder(f"malformed vertex {p!r}") from None

        if not MIN_VERTICES <= len(pts) <= MAX_VERTICES:
            raise DegenerateOccluder(
                f"expected {MIN_VERTICES}-{MAX_VERTICES} vertices, got {len(pts)}"
            )
        for p in pts:
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise DegenerateOccluder(f"non-finite vertex {tuple(p)}")
        if not is_convex(pts):
            raise DegenerateOccluder("vertices do not form a convex polygon")

        self.points = pts

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]


def to_world(pose, local_points):
    """Rotate then translate local points into world space, ignoring pose.scale."""
    return [
        pygame.Vector2(p).rotate_rad(pose.rotation) + pose.position
        for p in local_points
    ]
