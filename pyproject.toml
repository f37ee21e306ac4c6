[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapedit"
version = "0.1.0"
description = "A small vector shape editor with grouping, undo, styling and text save/load"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["graphics", "editor", "shapes", "vector", "undo", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shapedit = "shapedit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shapedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
