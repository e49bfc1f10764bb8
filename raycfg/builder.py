"""Turn primitive descriptions from a scene file into shapes and lights."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .hitable import Hitable
from .materials import Dielectric, DiffuseLight, Lambertian, Material, Metal
from .objects import Cone, Cylinder, Plane, Sphere, Triangle
from .textures import CheckerTexture, ImageTexture, SolidColor, Texture
from .vec3 import Vec3

_SOLID_NAMES = frozenset({"color", "solid", "Solid", "Color"})
_CHESS_NAMES = frozenset({"chess", "Chess"})
_IMAGE_NAMES = frozenset({"image", "Image", "img", "Img"})

_LAMBERTIAN_NAMES = frozenset({"lambertian", "Lambertian"})
_METAL_NAMES = frozenset({"metal", "Metal"})
_DIELECTRIC_NAMES = frozenset({"dielectric", "Dielectric"})
_LIGHT_NAMES = frozenset({"light", "Light"})

_SPHERE_NAMES = frozenset({"sphere", "sp", "Sp", "Sphere"})
_CYLINDER_NAMES = frozenset({"cylinder", "cy", "Cy", "Cylinder"})
_PLANE_NAMES = frozenset({"planes", "pl", "Pl", "Planes"})
_CONE_NAMES = frozenset({"cone", "co", "Co", "Cone"})
_TRIANGLE_NAMES = frozenset({"triangles", "tr", "Tr", "Triangles"})


@dataclass
class PrimitiveSpec:
    """Everything a scene file can say about one primitive."""

    type: str = ""
    center: Vec3 = field(default_factory=Vec3)
    radius: float = 0.0
    height: float = 0.0
    length: float = 0.0
    width: float = 0.0
    color: Vec3 = field(default_factory=Vec3)
    point1: Vec3 = field(default_factory=Vec3)
    point2: Vec3 = field(default_factory=Vec3)
    point3: Vec3 = field(default_factory=Vec3)
    texture_path: str = ""
    texture: str = "unknown"
    material: str = "lambertian"


def make_texture(kind: str, color: Vec3, texture_path: str = "") -> Texture:
    """Pick a texture by name; unknown names give a magenta and black checker."""
    if kind in _SOLID_NAMES:
        return SolidColor(color)
    if kind in _CHESS_NAMES:
        return CheckerTexture(0.32, Vec3(0.2, 0.3, 0.1), Vec3(0.9, 0.9, 0.9))
    if kind in _IMAGE_NAMES:
        return ImageTexture(texture_path)
    return CheckerTexture(0.75, Vec3(1.0, 0.02, 1.0), Vec3(0.0, 0.0, 0.0))


def make_material(kind: str, texture: Texture) -> Material:
    """Pick a material by name; unknown names give a Lambertian surface."""
    if kind in _LAMBERTIAN_NAMES:
        return Lambertian(texture)
    if kind in _METAL_NAMES:
        return Metal(Vec3(0.1, 0.2, 0.5), 0.5)
    if kind in _DIELECTRIC_NAMES:
        return Dielectric(1.5)
    if kind in _LIGHT_NAMES:
        return DiffuseLight(texture)
    return Lambertian(texture)


def build_primitive(spec: PrimitiveSpec) -> Hitable:
    """Build the shape a spec describes; unknown types give an empty sphere."""
    texture = make_texture(spec.texture, spec.color, spec.texture_path)
    material: Optional[Material] = make_material(spec.material, texture)
    if spec.type in _SPHERE_NAMES:
        return Sphere(spec.center, spec.radius, material)
    if spec.type in _CYLINDER_NAMES:
        return Cylinder(spec.center, spec.radius, spec.height, material)
    if spec.type in _PLANE_NAMES:
        return Plane(spec.center, spec.length, spec.width, spec.height, material)
    if spec.type in _CONE_NAMES:
        return Cone(spec.center, spec.radius, spec.height, material)
    if spec.type in _TRIANGLE_NAMES:
        return Triangle(spec.point1, spec.point2, spec.point3, material)
    return Sphere(Vec3(0.0, 0.0, 0.0), 0.0, material)


def create_light(center: Vec3, intensity: float, color: Vec3 = Vec3(1.0, 1.0, 1.0)) -> Hitable:
    """A glowing sphere whose radius is the light's intensity."""
    return Sphere(center, intensity, DiffuseLight(color))