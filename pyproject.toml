[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitrace"
version = "0.1.0"
description = "Fixed-point building blocks for path tracing a planetary scene: arithmetic, vectors, noise, terrain colouring and ray intersections"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ray tracing",
    "fixed-point",
    "perlin noise",
    "intersection",
    "rendering",
]
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orbitrace"]

[tool.pytest.ini_options]
addopts = "-ra"
