[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geomkit"
version = "0.1.0"
description = "Euclidean and hyperbolic plane geometry: points, lines, circles, view transformations and ruler-and-compass constructions"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "euclidean", "hyperbolic", "poincare", "beltrami-klein", "constructions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["geomkit"]

[tool.pytest.ini_options]
addopts = "-ra"
