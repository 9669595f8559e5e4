import pytest

from raypath import rng
from raypath.cornell import cornell_box, main, run
from raypath.scene import RenderConfig, Scene
from raypath.transform import TransHittable
from raypath.vec import Vec3


def test_scene_contents():
    scene = cornell_box(Scene(), 8, 6)
    assert len(scene.objects) == 9
    assert len(scene.lights) == 1
    assert sum(isinstance(o, TransHittable) for o in scene.objects) == 2
    assert scene.camera.origin == Vec3(278, 278, -800)
    assert (scene.camera.width, scene.camera.height) == (8, 6)


def test_default_size():
    scene = cornell_box(Scene())
    assert (scene.camera.width, scene.camera.height) == (600, 600)


def test_every_object_is_bounded():
    scene = cornell_box(Scene(), 4, 4)
    box = scene.objects.bounding_box(0, 0)
    for lo, hi in zip(box.minimum, box.maximum):
        assert lo < hi


def _pixels(text):
    lines = text.splitlines()
    return lines[:3], [tuple(map(int, line.split())) for line in lines[3:]]


@pytest.mark.parametrize("use_bvh", [True, False])
def test_run_writes_ppm(tmp_path, use_bvh):
    rng.seed(11)
    scene = cornell_box(Scene(), 3, 2)
    path = run(scene, RenderConfig(samples=1, max_depth=1, use_bvh=use_bvh), tmp_path / "out.ppm")
    header, pixels = _pixels(path.read_text(encoding="ascii"))
    assert header == ["P3", "3 2", "255"]
    assert len(pixels) == 6
    assert all(0 <= c <= 255 for pixel in pixels for c in pixel)


def test_main_renders_file(tmp_path):
    out = tmp_path / "box.ppm"
    code = main(
        ["--width", "4", "--height", "3", "--samples", "1", "--max-depth", "1",
         "--seed", "1", "--output", str(out)]
    )
    assert code == 0
    header, pixels = _pixels(out.read_text(encoding="ascii"))
    assert header == ["P3", "4 3", "255"]
    assert len(pixels) == 12


def test_main_rejects_bad_sizes(tmp_path):
    with pytest.raises(SystemExit):
        main(["--width", "0", "--output", str(tmp_path / "x.ppm")])