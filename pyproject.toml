[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gctproj"
version = "0.1.0"
description = "Cartographic map projections: forward and inverse equations between geographic and projected coordinates"
requires-python = ">=3.10"
dependencies = []
keywords = ["cartography", "map projection", "gis", "geodesy", "coordinates"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gctproj"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
