[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycfg"
version = "0.1.0"
description = "A small path-tracing renderer driven by libconfig-style scene files, writing binary PPM images."
requires-python = ">=3.10"
keywords = ["raytracer", "path tracing", "rendering", "ppm", "libconfig", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycfg = "raycfg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["raycfg"]

[tool.pytest.ini_options]
addopts = "-ra"
