# raypath

A compact Monte Carlo path tracer. Scenes are built from spheres,
triangles, axis-aligned rectangles, boxes, objects placed through a 4x4
model matrix and constant-density participating media, with Lambertian,
metal, dielectric, isotropic and emissive materials. An optional bounding
volume hierarchy speeds up intersection tests. The result is written as a
plain-text PPM (P3) image.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

The `raypath` command renders the Cornell box scene and writes it as PPM:

```
raypath --samples 16 --max-depth 8 --width 300 --height 300 --output box.ppm
```

| option        | default   | meaning                                  |
|---------------|-----------|------------------------------------------|
| `--samples`   | 16        | samples per pixel                        |
| `--max-depth` | 8         | maximum number of bounces per path       |
| `--no-bvh`    | off       | intersect against the flat object list   |
| `--width`     | 600       | image width in pixels                    |
| `--height`    | 600       | image height in pixels                   |
| `--seed`      | none      | seed the sampler for reproducible output |
| `--output`    | `out.ppm` | file to write                            |

Samples, width and height must be at least 1 and the depth at least 0;
other values are rejected with a usage error. Progress is logged to the
console.

## Library use

```python
from raypath.scene import Scene, RenderConfig
from raypath.cornell import cornell_box, run

scene = Scene()
cornell_box(scene, 200, 200)

config = RenderConfig.from_dict({"samples": 16, "max_depth": 8, "useBVH": True})
run(scene, config, "out.ppm")
```

`run` builds the scene's BVH when the configuration asks for one and none
has been built, renders, writes the PPM file and returns its `Path`.

Scenes can also be assembled by hand:

```python
from raypath.vec import Vec3
from raypath.camera import Camera
from raypath.hittable import Sphere
from raypath.material import Lambertian, DiffuseLight
from raypath.rect import XZRect
from raypath.scene import Scene
from raypath.renderer import Renderer

scene = Scene()
scene.add_camera(Camera(Vec3(0, 1, -5), Vec3(0, 1, 0), Vec3(0, 1, 0), 40.0, 160, 120))
scene.add_object(Sphere(Vec3(0, 1, 0), 1.0, Lambertian(Vec3(0.7, 0.3, 0.3))))
light = XZRect(-1, 1, -1, 1, 4, DiffuseLight(Vec3(4, 4, 4)))
scene.add_object(light)
scene.add_light(light)
scene.build_bvh()

renderer = Renderer(samples=8, max_depth=6, use_bvh=True)
image = renderer.render(scene, workers=4)   # numpy array, shape (height, width, 3)
renderer.write_ppm("sphere.ppm")
```

`Renderer.render` returns the image with row 0 at the bottom; `to_ppm` and
`write_ppm` write it top row first. Each pixel's summed colour goes through
`encode_pixel`: averaged over the samples, `NaN` components set to zero,
square-root gamma corrected, clamped to `[0, 1]` and scaled to `0..255`.
Rows are shared among worker threads of one process.

## Modules

| module              | contents                                                           |
|---------------------|--------------------------------------------------------------------|
| `raypath.rng`       | shared random source: `seed`, `random_double`, `random_int`, `clamp` |
| `raypath.vec`       | `Vec3` and direction helpers (`reflect`, `refract`, random sampling) |
| `raypath.ray`       | `Ray`                                                              |
| `raypath.aabb`      | `AABB` and `surrounding_box`                                       |
| `raypath.pdf`       | `Onb`, `SpherePdf`, `CosinePdf`, `HittablePdf`, `MixturePdf`       |
| `raypath.texture`   | `SolidColor`, `ImageTexture` (loads any image Pillow can read)     |
| `raypath.hittable`  | `HitRecord`, `HittableList`, `Sphere`, `Vertex`, `Triangle`, `Directional` |
| `raypath.material`  | `Lambertian`, `Metal`, `Dielectric`, `DiffuseLight`, `Isotropic`   |
| `raypath.rect`      | `XYRect`, `XZRect`, `YZRect`, `Box`                                |
| `raypath.transform` | `TransHittable`                                                    |
| `raypath.medium`    | `Medium`                                                           |
| `raypath.bvh`       | `BVHNode`, `box_compare`                                           |
| `raypath.camera`    | `Camera`                                                           |
| `raypath.scene`     | `Scene`, `RenderConfig`                                            |
| `raypath.renderer`  | `Renderer`, `encode_pixel`                                         |
| `raypath.cornell`   | `cornell_box`, `run`, `main`                                       |

`hit` methods return a `HitRecord` or `None`; `bounding_box` returns an
`AABB` or `None` for unbounded objects such as `Directional`, which are kept
in `Scene.other_objects` and tried only when nothing in the world is hit.
`BVHNode` raises `ValueError` for an empty list or objects without a box.

## Configuration

`RenderConfig.from_dict` reads three keys, all required; a missing key
raises `KeyError` and a value of the wrong type raises `TypeError`.

| key         | type | meaning                                        |
|-------------|------|------------------------------------------------|
| `samples`   | int  | samples per pixel                              |
| `max_depth` | int  | maximum number of bounces per path             |
| `useBVH`    | bool | intersect through the BVH rather than the list |

## Limitations

- Diffuse bounces draw from an even mixture of the material's cosine
  density and a `HittablePdf` over `Scene.lights`. `HittableList` and the
  rectangle classes keep the `Hittable` defaults for `pdf_value` and
  `random` (zero density, a fixed +x direction), so this mixture does not
  yet steer rays towards the lights.
- There is no interactive preview and no mesh file loading; scenes are
  built in code, and the only output format is PPM.
- Rendering runs in Python threads, so it is slow; keep images and sample
  counts small.