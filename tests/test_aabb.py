import math

from raypath.aabb import AABB, surrounding_box
from raypath.ray import Ray
from raypath.vec import Vec3

UNIT = AABB(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))


def test_ray_through_box_hits():
    r = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    assert UNIT.hit(r, 0.001, math.inf)


def test_ray_beside_box_misses():
    r = Ray(Vec3(2.0, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    assert not UNIT.hit(r, 0.001, math.inf)


def test_ray_pointing_away_misses():
    r = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, -1.0))
    assert not UNIT.hit(r, 0.001, math.inf)


def test_negative_direction_hits():
    r = Ray(Vec3(0.5, 0.5, 5.0), Vec3(0.0, 0.0, -1.0))
    assert UNIT.hit(r, 0.001, math.inf)


def test_t_max_before_box_misses():
    r = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    assert not UNIT.hit(r, 0.001, 2.0)


def test_diagonal_ray_hits():
    r = Ray(Vec3(-1.0, -1.0, -1.0), Vec3(1.0, 1.0, 1.0))
    assert UNIT.hit(r, 0.0, math.inf)


def test_surrounding_box_contains_both():
    a = AABB(Vec3(-1.0, 2.0, 0.0), Vec3(0.5, 3.0, 1.0))
    b = AABB(Vec3(0.0, -4.0, 0.5), Vec3(2.0, 0.0, 0.75))
    s = surrounding_box(a, b)
    for box in (a, b):
        for i in range(3):
            assert s.minimum[i] <= box.minimum[i]
            assert s.maximum[i] >= box.maximum[i]
    assert surrounding_box(a, a) == a