[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vang"
version = "0.1.0"
description = "A small voxel engine core: chunks with greedy cuboid packing, worlds, raycasting, items, blueprints, lights, layers and events."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "voxel",
    "engine",
    "game",
    "chunk",
    "raycast",
    "cellular-automaton",
    "blueprints",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vang"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
