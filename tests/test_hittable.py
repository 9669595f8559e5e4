import math

import pytest

from raypath import rng
from raypath.aabb import AABB
from raypath.hittable import (
    Directional,
    HitRecord,
    HittableList,
    Sphere,
    Triangle,
    Vertex,
)
from raypath.ray import Ray
from raypath.vec import Vec3


def _close(a, b):
    return tuple(a) == pytest.approx(tuple(b))


def test_set_face_normal_front_and_back():
    rec = HitRecord()
    rec.set_face_normal(Ray(Vec3(), Vec3(0, 0, -1)), Vec3(0, 0, 1))
    assert rec.front_face is True
    assert rec.normal == Vec3(0, 0, 1)
    rec.set_face_normal(Ray(Vec3(), Vec3(0, 0, 1)), Vec3(0, 0, 1))
    assert rec.front_face is False
    assert rec.normal == Vec3(0, 0, -1)


def test_empty_list_hits_nothing_and_has_no_box():
    empty = HittableList()
    assert empty.hit(Ray(Vec3(), Vec3(0, 0, -1)), 0.001, math.inf) is None
    assert empty.bounding_box(0, 0) is None


def test_list_returns_closest_hit():
    near_mat, far_mat = object(), object()
    world = HittableList([Sphere(Vec3(0, 0, -10), 1, far_mat)])
    world.add(Sphere(Vec3(0, 0, -5), 1, near_mat))
    rec = world.hit(Ray(Vec3(), Vec3(0, 0, -1)), 0.001, math.inf)
    assert rec.material is near_mat
    assert len(world) == 2
    world.clear()
    assert len(world) == 0


def test_list_bounding_box_covers_members():
    world = HittableList([Sphere(Vec3(0, 0, 0), 1, None), Sphere(Vec3(5, 0, 0), 2, None)])
    box = world.bounding_box(0, 0)
    for s in world:
        inner = s.bounding_box(0, 0)
        assert all(lo <= m for lo, m in zip(box.minimum, inner.minimum))
        assert all(hi >= m for hi, m in zip(box.maximum, inner.maximum))


def test_list_with_unbounded_member_has_no_box():
    world = HittableList([Sphere(Vec3(), 1, None), Directional(Vec3(0, -1, 0), None)])
    assert world.bounding_box(0, 0) is None


def test_sphere_hit_lies_on_surface():
    center = Vec3(0, 0, -5)
    sphere = Sphere(center, 1.0, "mat")
    ray = Ray(Vec3(), Vec3(0, 0, -1))
    rec = sphere.hit(ray, 0.001, math.inf)
    assert (rec.p - center).length() == pytest.approx(1.0)
    assert _close(ray.at(rec.t), rec.p)
    assert rec.front_face is True
    assert rec.normal.dot(ray.direction) < 0
    assert rec.material == "mat"


def test_sphere_behind_ray_is_missed():
    sphere = Sphere(Vec3(0, 0, -5), 1.0, None)
    assert sphere.hit(Ray(Vec3(), Vec3(0, 0, 1)), 0.001, math.inf) is None


def test_sphere_respects_t_max():
    sphere = Sphere(Vec3(0, 0, -5), 1.0, None)
    assert sphere.hit(Ray(Vec3(), Vec3(0, 0, -1)), 0.001, 1.0) is None


def test_sphere_hit_from_inside_is_back_face():
    center = Vec3(1, 2, 3)
    rec = Sphere(center, 2.0, None).hit(Ray(center, Vec3(0, 1, 0)), 0.001, math.inf)
    assert rec.front_face is False
    assert (rec.p - center).length() == pytest.approx(2.0)


@pytest.mark.parametrize(
    "point, expected",
    [
        (Vec3(1, 0, 0), (0.5, 0.5)),
        (Vec3(-1, 0, 0), (0.0, 0.5)),
        (Vec3(0, 1, 0), (0.5, 1.0)),
        (Vec3(0, -1, 0), (0.5, 0.0)),
        (Vec3(0, 0, 1), (0.25, 0.5)),
        (Vec3(0, 0, -1), (0.75, 0.5)),
    ],
)
def test_sphere_uv_documented_points(point, expected):
    assert Sphere.get_sphere_uv(point) == pytest.approx(expected)


def test_sphere_bounding_box_is_centered_cube():
    box = Sphere(Vec3(1, 2, 3), 0.5, None).bounding_box(0, 0)
    assert tuple(box.minimum) == pytest.approx((0.5, 1.5, 2.5))
    assert tuple(box.maximum) == pytest.approx((1.5, 2.5, 3.5))


def test_sphere_pdf_value_positive_towards_zero_away():
    sphere = Sphere(Vec3(0, 0, -5), 1.0, None)
    assert sphere.pdf_value(Vec3(), Vec3(0, 0, -1)) > 0
    assert sphere.pdf_value(Vec3(), Vec3(0, 0, 1)) == 0


def test_sphere_random_directions_stay_in_cone():
    rng.seed(7)
    center, radius = Vec3(0, 3, -4), 1.0
    sphere = Sphere(center, radius, None)
    axis = center.normalized()
    cos_max = math.sqrt(1 - radius * radius / center.length_squared())
    for _ in range(200):
        d = sphere.random(Vec3())
        assert d.normalized().dot(axis) >= cos_max - 1e-9


def test_sphere_add_texture_replaces_material():
    sphere = Sphere(Vec3(), 1.0, "old")
    sphere.add_texture("new")
    rec = sphere.hit(Ray(Vec3(0, 0, 5), Vec3(0, 0, -1)), 0.001, math.inf)
    assert rec.material == "new"


def _triangle():
    n = Vec3(0, 0, 1)
    return Triangle(
        Vertex(Vec3(0, 0, -1), n, (0.0, 0.0)),
        Vertex(Vec3(1, 0, -1), n, (1.0, 0.0)),
        Vertex(Vec3(0, 1, -1), n, (0.0, 1.0)),
        "tri",
    )


def test_triangle_hit_interpolates_uv():
    ray = Ray(Vec3(0.25, 0.375, 0), Vec3(0, 0, -1))
    rec = _triangle().hit(ray, 0.001, math.inf)
    assert rec.p.z == pytest.approx(-1)
    assert rec.u == pytest.approx(ray.origin.x)
    assert rec.v == pytest.approx(ray.origin.y)
    assert rec.front_face is True
    assert rec.material == "tri"


def test_triangle_miss_outside_and_parallel():
    tri = _triangle()
    assert tri.hit(Ray(Vec3(1, 1, 0), Vec3(0, 0, -1)), 0.001, math.inf) is None
    assert tri.hit(Ray(Vec3(0.2, 0.2, 0), Vec3(1, 0, 0)), 0.001, math.inf) is None


def test_triangle_bounding_box_spans_vertices():
    box = _triangle().bounding_box(0, 0)
    assert box == AABB(Vec3(0, 0, -1), Vec3(1, 1, -1))


def test_triangle_has_no_light_pdf():
    assert _triangle().pdf_value(Vec3(), Vec3(0, 0, -1)) == 0


def test_directional_hit_only_against_light_and_unbounded():
    light = Directional(Vec3(0, -1, 0), "sun")
    rec = light.hit(Ray(Vec3(), Vec3(0, 1, 0)), 0.001, math.inf)
    assert rec.t == math.inf
    assert rec.material == "sun"
    assert light.hit(Ray(Vec3(), Vec3(0, -1, 0)), 0.001, math.inf) is None
    assert light.hit(Ray(Vec3(), Vec3(0, 1, 0)), 0.001, 100.0) is None
    assert light.bounding_box(0, 0) is None