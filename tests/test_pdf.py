import math

import pytest

from raypath import rng
from raypath.pdf import CosinePdf, HittablePdf, MixturePdf, Onb, Pdf, SpherePdf
from raypath.vec import Vec3


class _ConstPdf(Pdf):
    def __init__(self, density, direction):
        self.density = density
        self.direction = direction

    def value(self, direction):
        return self.density

    def generate(self):
        return self.direction


class _Target:
    def __init__(self):
        self.calls = []

    def pdf_value(self, origin, direction):
        self.calls.append((origin, direction))
        return 0.75

    def random(self, origin):
        return origin * 2.0


def test_onb_is_orthonormal():
    basis = Onb.from_w(Vec3(0.3, -2.0, 0.7))
    for axis in (basis.u, basis.v, basis.w):
        assert axis.length() == pytest.approx(1.0)
    assert basis.u.dot(basis.v) == pytest.approx(0.0, abs=1e-12)
    assert basis.v.dot(basis.w) == pytest.approx(0.0, abs=1e-12)
    assert basis.u.dot(basis.w) == pytest.approx(0.0, abs=1e-12)


def test_onb_local_of_z_is_w():
    w = Vec3(1.0, 1.0, 0.0)
    basis = Onb.from_w(w)
    assert tuple(basis.local(Vec3(0.0, 0.0, 1.0))) == pytest.approx(tuple(w.normalized()))


def test_sphere_pdf():
    rng.seed(11)
    p = SpherePdf()
    assert p.value(Vec3(0.0, 1.0, 0.0)) == pytest.approx(1 / (4 * math.pi))
    assert p.generate().length() == pytest.approx(1.0)


def test_cosine_pdf_value():
    n = Vec3(0.0, 1.0, 0.0)
    p = CosinePdf(n)
    assert p.value(n * 5.0) == pytest.approx(1 / math.pi)
    assert p.value(-n) == 0.0


def test_cosine_pdf_generates_on_normal_side():
    rng.seed(12)
    n = Vec3(0.2, 0.3, -0.9)
    p = CosinePdf(n)
    for _ in range(200):
        d = p.generate()
        assert d.dot(n) >= -1e-12
        assert p.value(d) >= 0.0


def test_hittable_pdf_delegates():
    target = _Target()
    origin = Vec3(1.0, 2.0, 3.0)
    direction = Vec3(0.0, 0.0, 1.0)
    p = HittablePdf(target, origin)
    assert p.value(direction) == 0.75
    assert target.calls == [(origin, direction)]
    assert p.generate() == origin * 2.0


def test_mixture_pdf_averages_and_samples_both():
    rng.seed(13)
    a = _ConstPdf(0.2, Vec3(1.0, 0.0, 0.0))
    b = _ConstPdf(0.6, Vec3(0.0, 1.0, 0.0))
    mix = MixturePdf(a, b)
    assert mix.value(Vec3(0.0, 0.0, 1.0)) == pytest.approx((a.density + b.density) / 2)
    samples = {mix.generate() for _ in range(200)}
    assert samples == {a.direction, b.direction}