[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arlmesh"
version = "0.1.0"
description = "Resample a terrain mesh onto a regular grid and export it as an ARL triangle-strip file"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "terrain", "triangle strip", "kd-tree", "heightmap", "obj", "arl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arlmesh = "arlmesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arlmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
