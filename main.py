import argparse
import logging
import sys

import pygame

from settings import (
    WIDTH, HEIGHT, FPS, BACKGROUND_COLOR, MAX_DISTANCE, RAY_EPSILON,
    BOUNDS_COLOR, OBSERVER_COLOR, LOG_FORMAT, LOG_LEVEL,
)

from core.camera import Camera
from core.debug_lines import DebugLines
from core.input_manager import InputManager

from scenes import DemoScene, SceneBase
from hud.debug_hud import DebugHud
from shadowcast import compute_visibility, point_in_polygon

logger = logging.getLogger(__name__)

OBSERVER_MODES = ("origin", "cursor")


class FrameStats:
    """Numbers from the last visibility pass, read by the HUD."""

    def __init__(self, scene_name, observer_mode):
        self.scene_name = scene_name
        self.observer_mode = observer_mode
        self.observer = pygame.Vector2(0, 0)
        self.occluders = 0
        self.skipped = 0
        self.rays = 0
        self.hits = 0
        self.outline = 0
        self.cursor_lit = False

    def record(self, result, occluders):
        self.observer = pygame.Vector2(result.observer)
        self.occluders = occluders
        self.skipped = result.skipped
        self.rays = len(result.samples)
        self.hits = result.hits
        self.outline = len(result.outline)


def load_scene(name):
    if name.endswith(".json"):
        return SceneBase.from_json(name)
    if name == "demo":
        return DemoScene()
    raise SystemExit(f"Unknown scene '{name}' (use 'demo' or a .json path)")


def main():
    parser = argparse.ArgumentParser(description="Shadow outline debug view")
    parser.add_argument("--scene", type=str, default="demo",
                        help="'demo' or path to a scene .json file")
    parser.add_argument("--observer", choices=OBSERVER_MODES, default="origin",
                        help="Cast from the world origin or from the mouse cursor")
    parser.add_argument("--max-distance", type=float, default=MAX_DISTANCE)
    parser.add_argument("--epsilon", type=float, default=RAY_EPSILON,
                        help="Angular offset (radians) of the silhouette rays")
    parser.add_argument("--log-level", type=str, default=LOG_LEVEL,
                        help="DEBUG, INFO, WARNING, ...")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    if args.max_distance <= 0:
        parser.error("--max-distance must be > 0")

    current_scene = load_scene(args.scene)

    pygame.init()

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Shadow Outline")

    clock = pygame.time.Clock()

    camera = Camera()
    input_manager = InputManager()
    lines = DebugLines()

    observer_mode = args.observer
    show_rays = True
    show_bounds = True
    mouse_aim = True

    stats = FrameStats(current_scene.name, observer_mode)
    hud = DebugHud(stats)

    logger.info(f"Running scene '{current_scene.name}' with observer at {observer_mode}")

    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # -----------------------------
        # Events
        # -----------------------------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEWHEEL:
                camera.zoom_by(1.1 ** event.y)

        # -----------------------------
        # Input
        # -----------------------------
        input_manager.update()

        if input_manager.is_pressed("quit"):
            running = False
        if input_manager.is_pressed("toggle_rays"):
            show_rays = not show_rays
        if input_manager.is_pressed("toggle_bounds"):
            show_bounds = not show_bounds
        if input_manager.is_pressed("toggle_mouse_aim"):
            mouse_aim = not mouse_aim
        if input_manager.is_pressed("toggle_observer"):
            index = OBSERVER_MODES.index(observer_mode)
            observer_mode = OBSERVER_MODES[(index + 1) % len(OBSERVER_MODES)]
            stats.observer_mode = observer_mode
            logger.debug(f"Observer mode: {observer_mode}")
        if input_manager.is_pressed("toggle_follow"):
            camera.follow(None if camera.target else current_scene.player)
        if input_manager.is_pressed("toggle_hud"):
            hud.visible = not hud.visible
        if input_manager.is_down("zoom_in"):
            camera.zoom_by(1.02)
        if input_manager.is_down("zoom_out"):
            camera.zoom_by(1 / 1.02)

        # -----------------------------
        # Update
        # -----------------------------
        current_scene.update(dt, input_manager, camera, mouse_aim)
        camera.update(dt)

        mouse_world = camera.to_world(input_manager.get_mouse_pos())
        if observer_mode == "cursor":
            observer = mouse_world
        else:
            observer = pygame.Vector2(0, 0)

        # -----------------------------
        # Visibility pass
        # -----------------------------
        records = current_scene.occluder_records()
        result = compute_visibility(observer, records, args.max_distance, args.epsilon)
        stats.record(result, len(records))
        stats.cursor_lit = point_in_polygon(mouse_world.x, mouse_world.y, result.outline)

        # -----------------------------
        # Draw
        # -----------------------------
        screen.fill(BACKGROUND_COLOR)
        current_scene.draw(screen, camera)

        if show_bounds:
            current_scene.draw_bounds(lines, BOUNDS_COLOR)
        current_scene.draw_visibility(lines, result, show_rays)
        lines.flush(screen, camera)

        pygame.draw.circle(screen, OBSERVER_COLOR, camera.apply(observer), 4)
        hud.draw(screen)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
