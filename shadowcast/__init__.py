from shadowcast.errors import DegenerateOccluder, InvalidRay, ShadowcastError
from shadowcast.geometry import ConvexPolygon, Pose, to_world
from shadowcast.outline import assemble, outline_segments, point_in_polygon
from shadowcast.raycast import Ray, cast, cast_to_all, impact_point
from shadowcast.sampling import Sample, SampleKind, cast_samples, sample_points, sample_rays
from shadowcast.visibility import VisibilityResult, compute_visibility, prepare_occluders

__all__ = [
    "ConvexPolygon",
    "DegenerateOccluder",
    "InvalidRay",
    "Pose",
    "Ray",
    "Sample",
    "SampleKind",
    "ShadowcastError",
    "VisibilityResult",
    "assemble",
    "cast",
    "cast_samples",
    "cast_to_all",
    "compute_visibility",
    "impact_point",
    "outline_segments",
    "point_in_polygon",
    "prepare_occluders",
    "sample_points",
    "sample_rays",
    "to_world",
]
