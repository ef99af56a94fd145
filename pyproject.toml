[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcutools"
version = "0.1.0"
description = "Small numeric, statistics and formatting helpers: fractions, complex numbers, angles, histograms, running averages and medians, value mapping, byte sets, stopwatches, XML writing, IEEE 754 inspection and temperature formulas."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fraction",
    "complex",
    "angle",
    "histogram",
    "running-average",
    "running-median",
    "interpolation",
    "bitset",
    "stopwatch",
    "xml",
    "ieee754",
    "temperature",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcutools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
