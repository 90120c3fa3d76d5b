from scenes.scene_base import SceneBase
from scenes.demo_scene import DemoScene
