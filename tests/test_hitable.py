import pytest

from raycfg.hitable import Hitable, HitableList, HitRecord
from raycfg.ray import Ray
from raycfg.vec3 import Vec3

RAY = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))


class _Wall(Hitable):
    def __init__(self, t, tag):
        self.t = t
        self.tag = tag

    def hit(self, ray, t_min, t_max):
        if t_min < self.t < t_max:
            return HitRecord(
                t=self.t,
                p=ray.point_at_parameter(self.t),
                normal=Vec3(0, 0, 1),
                material=self.tag,
            )
        return None

    def __repr__(self):
        return f"_Wall({self.tag})"


def test_hitable_is_abstract():
    with pytest.raises(TypeError):
        Hitable()


def test_closest_hit_wins_in_any_order():
    walls = [_Wall(5.0, "far"), _Wall(2.0, "near"), _Wall(3.0, "middle")]
    for order in (walls, list(reversed(walls))):
        rec = HitableList(order).hit(RAY, 0.001, float("inf"))
        assert rec is not None
        assert rec.material == "near"
        assert rec.t == 2.0
        assert rec.p == RAY.point_at_parameter(2.0)


def test_empty_list_hits_nothing():
    assert HitableList().hit(RAY, 0.001, float("inf")) is None


def test_range_limits_are_respected():
    world = HitableList([_Wall(0.0005, "behind"), _Wall(10.0, "beyond")])
    assert world.hit(RAY, 0.001, 9.0) is None
    rec = world.hit(RAY, 0.001, 11.0)
    assert rec is not None and rec.material == "beyond"


def test_record_defaults():
    rec = HitRecord(t=1.0, p=Vec3(), normal=Vec3(0, 1, 0))
    assert rec.material is None
    assert (rec.u, rec.v) == (0.0, 0.0)


def test_len_and_iteration():
    walls = [_Wall(1.0, "a"), _Wall(2.0, "b")]
    world = HitableList(walls)
    assert len(world) == 2
    assert list(world) == walls


def test_dump_lists_every_object():
    world = HitableList([_Wall(1.0, "a"), _Wall(2.0, "b")])
    lines = world.dump().splitlines()
    assert len(lines) == 1 + len(world)
    assert "_Wall(a)" in lines[1]
    assert "_Wall(b)" in lines[2]