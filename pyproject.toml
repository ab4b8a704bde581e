[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfckit"
version = "0.1.0"
description = "Building blocks for simple 2D games: colours, vectors, rectangles, sprite geometry and motion, game state and cached resource loading."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "sprite", "vector", "rectangle", "color"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gfckit"]

[tool.pytest.ini_options]
addopts = "-ra"
