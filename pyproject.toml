[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raypath"
version = "0.1.0"
description = "A small Monte Carlo path tracer with BVH acceleration, textured materials and PPM output"
requires-python = ">=3.10"
keywords = ["path tracing", "ray tracing", "rendering", "bvh", "cornell box", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raypath = "raypath.cornell:main"

[tool.hatch.build.targets.wheel]
packages = ["raypath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
