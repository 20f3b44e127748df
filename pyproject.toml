[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fjetsim"
version = "1.0.0"
description = "Rigid-body fighter jet flight model with cameras, meshes and input handling"
requires-python = ">=3.10"
keywords = ["flight", "simulation", "physics", "aircraft", "camera", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fjetsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
