import json
import logging

import pygame

from core.shadow_caster import ShadowCaster
from data.caster_stats import CASTER_STATS, PLAYER_STATS
from settings import RAY_HIT_COLOR, RAY_ESCAPE_COLOR, OUTLINE_COLOR

logger = logging.getLogger(__name__)


class SceneBase:
    """Entity store for one scene: the shadow casters and the player among them."""

    def __init__(self, name="scene"):
        self.name = name
        self.casters = []
        self.player = None

    @classmethod
    def from_json(cls, path):
        """Construct a SceneBase from a JSON scene file.

        Casters are not validated here; a degenerate outline is rejected by
        the visibility pass and only that caster goes missing from it.
        """
        with open(path, "r") as f:
            data = json.load(f)

        scene = cls(name=data.get("name", str(path)))

        for cdata in data["casters"]:
            shape = cdata.get("shape")
            if shape is not None:
                stats = CASTER_STATS.get(shape)
                if stats is None:
                    logger.warning(f"Unknown caster shape '{shape}' in {path}; skipping")
                    continue
                points = stats["points"]
                color = stats["color"]
            else:
                points = cdata["points"]
                color = (200, 200, 200)
            color = tuple(cdata.get("color", color))

            caster = ShadowCaster(
                cdata.get("name", shape or "caster"),
                points,
                position=(cdata.get("x", 0.0), cdata.get("y", 0.0)),
                rotation=cdata.get("rotation", 0.0),
                scale=cdata.get("scale", 1.0),
                color=color,
            )
            scene.add_caster(caster, player=cdata.get("player", False))

        logger.info(f"Loaded scene '{scene.name}' with {len(scene.casters)} casters")
        return scene

    def add_caster(self, caster, player=False):
        self.casters.append(caster)
        if player:
            self.player = caster
        return caster

    # =====================================================
    # DATA SOURCE
    # =====================================================

    def occluder_records(self):
        """(pose, local_points) for every caster, in insertion order."""
        return [caster.record() for caster in self.casters]

    # =====================================================
    # UPDATE
    # =====================================================

    def update(self, dt, input_manager, camera, mouse_aim=True):
        """Move the player with the keyboard and turn it toward the mouse."""
        if self.player is None:
            return

        move = input_manager.move_axis()
        if move.length_squared() > 0:
            self.player.move(move.normalize() * PLAYER_STATS["speed"] * dt)

        if mouse_aim:
            mouse_world = camera.to_world(input_manager.get_mouse_pos())
            self.player.face(mouse_world, PLAYER_STATS["dead_zone"])
        else:
            turn = input_manager.turn_axis()
            if turn:
                self.player.rotate(turn * PLAYER_STATS["turn_speed"] * dt)

    # =====================================================
    # DRAW
    # =====================================================

    def draw(self, screen, camera):
        for caster in self.casters:
            caster.draw(screen, camera)

    def draw_bounds(self, lines, color=None):
        for caster in self.casters:
            caster.draw_bounds(lines, color)

    def draw_visibility(self, lines, result, show_rays=True):
        """Push the outline (and optionally every cast ray) into the line buffer."""
        if show_rays:
            for sample in result.samples:
                color = RAY_HIT_COLOR if sample.hit else RAY_ESCAPE_COLOR
                lines.line(sample.ray.origin, sample.point, color)

        for a, b in result.segments():
            lines.line(a, b, OUTLINE_COLOR)
