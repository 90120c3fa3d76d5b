# settings.py

WIDTH = 1024
HEIGHT = 768
FPS = 60
BACKGROUND_COLOR = (24, 24, 30)

# Pixels per world unit
ZOOM = 8.0
ZOOM_MIN = 1.0
ZOOM_MAX = 40.0

# Visibility pass
MAX_DISTANCE = 1000.0
RAY_EPSILON = 0.001

# Debug line colors
BOUNDS_COLOR = (90, 200, 255)
RAY_HIT_COLOR = (255, 220, 80)
RAY_ESCAPE_COLOR = (110, 110, 90)
OUTLINE_COLOR = (255, 90, 90)
OBSERVER_COLOR = (255, 255, 255)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = "INFO"
