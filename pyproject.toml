[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polymesh"
version = "1.0.0"
description = "Load polygonal meshes from CSV cell files, check them, and export them to the UCD format"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "polygonal mesh", "ucd", "paraview", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest"]

[project.scripts]
polymesh = "polymesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polymesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
