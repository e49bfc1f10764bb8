"""Command-line checks and loading of scene files into cameras, lights and objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from .builder import PrimitiveSpec, build_primitive, create_light
from .color import Color
from .config import Config, ConfigError, load_config
from .errors import ParsingError
from .hitable import Hitable, HitableList
from .vec3 import Vec3

_log = logging.getLogger(__name__)


@dataclass
class CameraSettings:
    """The camera block of a scene file."""

    width: int = 0
    height: int = 0
    position: tuple[int, int, int] = (0, 0, 0)
    rotation: tuple[int, int, int] = (0, 0, 0)
    fov: float = 0.0
    dof: float = 0.0
    quality: int = 100


@dataclass
class LightSettings:
    """The lights block of a scene file."""

    skycolor: Color = field(default_factory=Color)
    positions: list[Vec3] = field(default_factory=list)


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Scene:
    """A loaded scene: camera settings, light settings and the objects to render."""

    camera: CameraSettings
    light: LightSettings
    world: HitableList

    def dump(self) -> str:
        """A readable listing of the camera and light settings."""
        cam = self.camera
        lines = [
            "Camera:",
            f"\tcamera.resolution.width: {cam.width}",
            f"\tcamera.resolution.height: {cam.height}",
            f"\tcamera.position.x: {cam.position[0]}",
            f"\tcamera.position.y: {cam.position[1]}",
            f"\tcamera.position.z: {cam.position[2]}",
            f"\tcamera.rotation.x: {cam.rotation[0]}",
            f"\tcamera.rotation.y: {cam.rotation[1]}",
            f"\tcamera.rotation.z: {cam.rotation[2]}",
            f"\tcamera.fov: {_fmt(cam.fov)}",
            f"\tcamera.dof: {_fmt(cam.dof)}",
            "Light:",
        ]
        if self.light.positions:
            lines.append("\tlight.positions:")
        for index, pos in enumerate(self.light.positions):
            lines.append(f"\t\tlight.position[{index}].x: {_fmt(pos.x)}")
            lines.append(f"\t\tlight.position[{index}].y: {_fmt(pos.y)}")
            lines.append(f"\t\tlight.position[{index}].z: {_fmt(pos.z)}")
        return "\n".join(lines)


def help_text() -> str:
    """The usage message."""
    return "USAGE: ./raytracer <SCENE_FILE>\n\tSCENE_FILE: scene configuration"


def check_args(argv: Sequence[str]) -> Optional[str]:
    """Validate the arguments after the program name.

    Returns the scene file path, or None when help was asked for.
    Raises ParsingError for a wrong argument count or file extension.
    """
    if len(argv) != 1:
        raise ParsingError("Invalid number of arguments")
    arg = argv[0]
    if arg == "--help":
        return None
    if ".cfg" not in arg:
        raise ParsingError("Invalid file extension")
    return arg


def _read_camera(config: Config) -> CameraSettings:
    def integer(path: str) -> int:
        return config.lookup_value(f"camera.{path}", 0)

    return CameraSettings(
        width=integer("resolution.width"),
        height=integer("resolution.height"),
        position=(integer("position.x"), integer("position.y"), integer("position.z")),
        rotation=(integer("rotation.x"), integer("rotation.y"), integer("rotation.z")),
        fov=config.lookup_value("camera.fieldOfView", 0.0),
        dof=config.lookup_value("camera.depthOfField", 0.0),
        quality=config.lookup_value("camera.quality", 100),
    )


def _lookup_list(config: Config, path: str) -> list[Any]:
    value = config.lookup(path)
    if not isinstance(value, list):
        raise ConfigError(f"setting is not a list: {path}")
    return value


def _coordinate(point: Any, key: str, path: str) -> float:
    if not isinstance(point, dict) or key not in point:
        raise ConfigError(f"setting not found: {path}.{key}")
    value = point[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"setting type mismatch: {path}.{key}")
    return float(value)


def _vec(config: Config, prefix: str) -> Vec3:
    return Vec3(
        config.lookup_value(f"{prefix}.x", 0.0),
        config.lookup_value(f"{prefix}.y", 0.0),
        config.lookup_value(f"{prefix}.z", 0.0),
    )


def _read_primitive(config: Config, index: int) -> PrimitiveSpec:
    prefix = f"primitives.[{index}]"
    kind = config.lookup(f"{prefix}.type")
    if not isinstance(kind, str):
        raise ConfigError(f"setting type mismatch: {prefix}.type")
    color = Color(
        config.lookup_value(f"{prefix}.color.r", 0),
        config.lookup_value(f"{prefix}.color.g", 0),
        config.lookup_value(f"{prefix}.color.b", 0),
    ).to_vec3()
    spec = PrimitiveSpec(
        type=kind,
        center=_vec(config, prefix),
        radius=config.lookup_value(f"{prefix}.radius", 0.0),
        height=config.lookup_value(f"{prefix}.height", 0.0),
        length=config.lookup_value(f"{prefix}.length", 0.0),
        width=config.lookup_value(f"{prefix}.width", 0.0),
        color=color,
        point1=_vec(config, f"{prefix}.point1"),
        point2=_vec(config, f"{prefix}.point2"),
        point3=_vec(config, f"{prefix}.point3"),
        texture_path=config.lookup_value(f"{prefix}.texturePatch", ""),
        texture=config.lookup_value(f"{prefix}.texture", "unknown"),
        material=config.lookup_value(f"{prefix}.material", "lambertian"),
    )
    _log.debug("primitive %d: %s at %s, colour %s", index, spec.type, spec.center, spec.color)
    return spec


def _read_light(config: Config, index: int) -> Hitable:
    prefix = f"lights.point.[{index}]"
    color = Color(
        config.lookup_value(f"{prefix}.color.r", 0),
        config.lookup_value(f"{prefix}.color.g", 0),
        config.lookup_value(f"{prefix}.color.b", 255),
    ).to_vec3()
    intensity = config.lookup_value(f"{prefix}.intensity", 1.0)
    return create_light(_vec(config, prefix), intensity, color)


def scene_from_config(config: Config) -> Scene:
    """Build a scene from a parsed configuration; raises ConfigError on missing settings."""
    camera = _read_camera(config)

    points = _lookup_list(config, "lights.point")
    light = LightSettings(
        skycolor=Color(
            config.lookup_value("lights.skycolor.r", 0),
            config.lookup_value("lights.skycolor.g", 0),
            config.lookup_value("lights.skycolor.b", 0),
        ),
        positions=[
            Vec3(*(_coordinate(point, key, f"lights.point.[{index}]") for key in "xyz"))
            for index, point in enumerate(points)
        ],
    )

    primitives = _lookup_list(config, "primitives")
    objects: list[Hitable] = [
        build_primitive(_read_primitive(config, index)) for index in range(len(primitives))
    ]
    objects.extend(_read_light(config, index) for index in range(len(points)))
    _log.debug("objects created: %d, lights created: %d", len(objects), len(points))

    return Scene(camera=camera, light=light, world=HitableList(objects))


def load_scene(path: Union[str, Path]) -> Scene:
    """Read a scene file; raises ConfigError if it cannot be read or is incomplete."""
    return scene_from_config(load_config(path))