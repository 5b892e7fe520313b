[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "shapeworks"
version = "0.1.0"
description = "A plain-text workspace of points, spheres and transformations for simple 3D modelling, with an editor shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "modelling", "geometry", "workspace", "transformations", "matrices"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapeworks = "shapeworks.cli:main"

[tool.setuptools.packages.find]
include = ["shapeworks*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
