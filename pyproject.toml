[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitinvaders"
version = "0.1.0"
description = "Renderer-independent core of a small 2D arcade game: vectors, bounds, collisions, animation, particles, input, camera, text layout and save files."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "arcade",
    "2d",
    "vector",
    "collision",
    "animation",
    "particles",
    "input",
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
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orbitinvaders"]

[tool.hatch.build.targets.sdist]
include = ["orbitinvaders", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
