"""Path tracing of a scene into a PPM image."""

from __future__ import annotations

import math
import random
from pathlib import Path
from typing import Union

from .camera import Camera
from .hitable import Hitable
from .observer import FileObserver, scene_path_for
from .parsing import Scene, load_scene
from .ppm import PpmImage
from .ray import Ray
from .vec3 import Vec3

_MAX_DEPTH = 50
_T_MIN = 0.001


def output_name(path: str) -> str:
    """The image file name for a scene path: its base name with a .ppm suffix."""
    base = path[path.rfind("/") + 1:]
    dot = base.rfind(".")
    if dot != -1:
        base = base[:dot]
    return base + ".ppm"


def _to_byte(component: float) -> int:
    if not math.isfinite(component):
        return 0
    return int(255.99 * component)


def _gamma(component: float) -> float:
    return math.sqrt(component) if component >= 0 else math.nan


class Renderer:
    """Renders scenes by averaging random samples through each pixel."""

    def __init__(
        self,
        background: Vec3 = Vec3(),
        output_dir: Union[str, Path] = "screenshots",
    ) -> None:
        self.background = background
        self.output_dir = Path(output_dir)

    def ray_color(self, ray: Ray, world: Hitable, depth: int = 0) -> Vec3:
        """The colour carried back along a ray, following up to 50 bounces."""
        rec = world.hit(ray, _T_MIN, math.inf)
        if rec is None:
            return self.background
        material = rec.material
        if material is None:
            return Vec3()
        emitted = material.emitted(rec.u, rec.v, rec.p)
        if depth < _MAX_DEPTH:
            scatter = material.scatter(ray, rec)
            if scatter is not None:
                return emitted + scatter.attenuation * self.ray_color(
                    scatter.scattered, world, depth + 1
                )
        return emitted

    def render_pixels(self, scene: Scene) -> PpmImage:
        """Trace every pixel of the scene; the sky colour becomes the background."""
        settings = scene.camera
        samples = settings.quality
        if samples <= 0:
            raise ValueError("camera quality must be positive")
        width, height = settings.width, settings.height
        camera = Camera.from_settings(settings)
        self.background = scene.light.skycolor.to_vec3()
        image = PpmImage(width, height)
        for i in range(height - 1, -1, -1):
            for j in range(width):
                total = Vec3()
                for _ in range(samples):
                    u = (j + random.random()) / width
                    v = (i + random.random()) / height
                    total = total + self.ray_color(camera.get_ray(u, v), scene.world, 0)
                col = total / float(samples)
                image.set_pixel(j, i, *(_to_byte(_gamma(c)) for c in col))
        return image

    def render(self, scene: Scene, filename: str) -> Path:
        """Render and save the image; re-render if the matching scene file changed meanwhile."""
        observer = FileObserver(scene_path_for(filename))
        observer.start()
        image = self.render_pixels(scene)
        while observer.is_modified():
            print("File modified, reloading...")
            scene = load_scene(observer.path)
            print("File reloaded")
            print(scene.dump())
            image = self.render_pixels(scene)
        image.filename = filename
        return image.save(self.output_dir)