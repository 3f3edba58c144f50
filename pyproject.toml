[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcsynth"
version = "0.1.0"
description = "Labelled transition systems, resource topologies and controller synthesis for product recipes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "labelled transition system",
    "lts",
    "controller synthesis",
    "topology",
    "manufacturing",
    "recipe",
    "graphviz",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pcsynth = "pcsynth.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["pcsynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
