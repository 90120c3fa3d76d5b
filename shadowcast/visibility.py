"""One visibility pass: occluder records in, closed shadow outline out.

Nothing is cached between calls; every frame rebuilds the outline from the
records it is handed.
"""

import logging
from dataclasses import dataclass, field

import pygame

from shadowcast.errors import DegenerateOccluder
from shadowcast.geometry import ConvexPolygon, to_world
from shadowcast.outline import assemble, outline_segments
from shadowcast.sampling import MAX_DISTANCE, RAY_EPSILON, Sample, cast_samples

logger = logging.getLogger(__name__)


@dataclass
class VisibilityResult:
    observer: pygame.Vector2
    samples: list[Sample] = field(default_factory=list)
    outline: list[pygame.Vector2] = field(default_factory=list)
    skipped: int = 0

    @property
    def hits(self):
        return sum(1 for s in self.samples if s.hit)

    def segments(self):
        return outline_segments(self.outline)


def prepare_occluders(records):
    """Validate (pose, local_points) records and move them into world space.

    Returns (world_polygons, skipped_count). A degenerate occluder is logged
    and dropped; the rest of the pass carries on without it.
    """
    polygons = []
    skipped = 0
    for index, (pose, points) in enumerate(records):
        try:
            polygon = ConvexPolygon(points)
        except DegenerateOccluder as e:
            logger.warning(f"Skipping occluder {index} at {pose!r}: {e}")
            skipped += 1
            continue
        polygons.append(to_world(pose, polygon))
    return polygons, skipped


def compute_visibility(observer, records, max_distance=MAX_DISTANCE, epsilon=RAY_EPSILON):
    """Run the full pass for one observer and return samples plus outline."""
    observer = pygame.Vector2(observer)
    polygons, skipped = prepare_occluders(records)

    samples = cast_samples(observer, polygons, epsilon, max_distance)
    outline = assemble((s.point for s in samples), observer)

    logger.debug(
        f"Visibility pass: {len(polygons)} occluders, {len(samples)} rays, "
        f"{sum(1 for s in samples if s.hit)} hits, {skipped} skipped"
    )
    return VisibilityResult(observer, samples, outline, skipped)
