# Local-space outlines for shadow casters. Insertion order is winding order.
CASTER_STATS = {
    "pentagon": {
        "points": [(-5.0, -15.0), (5.0, -15.0), (5.0, 0.0), (0.0, 5.0), (-5.0, 0.0)],
        "color": (90, 200, 255),
    },
    "square": {
        "points": [(-10.0, -10.0), (10.0, -10.0), (10.0, 10.0), (-10.0, 10.0)],
        "color": (120, 220, 140),
    },
    "small_square": {
        "points": [(-5.0, -5.0), (5.0, -5.0), (5.0, 5.0), (-5.0, 5.0)],
        "color": (120, 220, 140),
    },
    "triangle": {
        "points": [(0.0, 6.0), (-5.0, -4.0), (5.0, -4.0)],
        "color": (230, 160, 70),
    },
    "hexagon": {
        "points": [(6.0, 0.0), (3.0, 5.2), (-3.0, 5.2), (-6.0, 0.0), (-3.0, -5.2), (3.0, -5.2)],
        "color": (200, 130, 230),
    },
    "plank": {
        "points": [(-12.0, -1.5), (12.0, -1.5), (12.0, 1.5), (-12.0, 1.5)],
        "color": (170, 150, 120),
    },
}

PLAYER_STATS = {
    "shape": "square",
    # world units / second
    "speed": 30.0,
    # radians / second for keyboard rotation
    "turn_speed": 2.0,
    # visual scale only; occlusion ignores it
    "scale": 0.1,
    "dead_zone": 0.5,
}
