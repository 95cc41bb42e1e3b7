[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monolayer"
version = "2.0"
description = "Radiation and drug dose-response curves, medium glucose depletion, cell-scene playback and plot curves for a tumour cell monolayer simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["tumour", "monolayer", "radiotherapy", "drug", "simulation", "survival fraction"]
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
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monolayer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
