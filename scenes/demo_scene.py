from scenes.scene_base import SceneBase
from core.shadow_caster import ShadowCaster
from data.caster_stats import CASTER_STATS, PLAYER_STATS


class DemoScene(SceneBase):
    def __init__(self):
        super().__init__(name="demo")

        self._place_casters()
        self._place_player()

    def _place_casters(self):
        # Pentagon just right of the observer, turned one radian
        self.add_caster(ShadowCaster.from_stats(
            "pentagon", CASTER_STATS["pentagon"], position=(20.5, 0.5), rotation=1.0,
        ))

        self.add_caster(ShadowCaster.from_stats(
            "hexagon", CASTER_STATS["hexagon"], position=(-25.0, 18.0),
        ))

        self.add_caster(ShadowCaster.from_stats(
            "triangle", CASTER_STATS["triangle"], position=(-15.0, -22.0), rotation=0.4,
        ))

        # Overlaps the pentagon's shadow so rays pass through two casters
        self.add_caster(ShadowCaster.from_stats(
            "plank", CASTER_STATS["plank"], position=(38.0, 4.0), rotation=1.4,
        ))

    def _place_player(self):
        stats = PLAYER_STATS
        self.add_caster(
            ShadowCaster.from_stats(
                "player", CASTER_STATS[stats["shape"]],
                position=(10.0, 30.0), rotation=1.0, scale=stats["scale"],
            ),
            player=True,
        )
