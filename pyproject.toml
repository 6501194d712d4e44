[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gktc"
version = "0.1.0"
description = "Count the triangles in an undirected graph read from a METIS or TSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "triangle counting", "metis", "sparse", "network analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gktc = "gktc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gktc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
