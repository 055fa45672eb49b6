[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "particlesim"
version = "0.1.0"
description = "Small particle physics playground: vectors, bouncing balls, repulsion and collisions"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "particles", "simulation", "vectors", "collisions"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
particlesim-demo = "particlesim.body:main"

[tool.setuptools.packages.find]
include = ["particlesim*"]

[tool.pytest.ini_options]
addopts = "-ra"
