[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geomkit"
version = "0.1.0"
description = "Computational geometry primitives, predicates, intersections, KD-trees and BSP trees"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "geometry",
    "computational-geometry",
    "kd-tree",
    "bsp",
    "dcel",
    "intersection",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["geomkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
