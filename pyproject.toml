[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gaskit"
version = "0.1.0"
description = "Gas-in-a-box simulation with an escape hole in one wall and energy statistics"
requires-python = ">=3.10"
keywords = ["gas", "simulation", "molecular dynamics", "physics", "lennard-jones"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gaskit = "gaskit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gaskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
