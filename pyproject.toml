[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubscene"
version = "0.1.0"
description = "Parser and validator for .cub scene files describing ray-casting game maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "map", "parser", "scene", "validation", "cub"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubscene = "cubscene.parser:main"

[tool.hatch.build.targets.wheel]
packages = ["cubscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
