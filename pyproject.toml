[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxspell"
version = "0.1.0"
description = "Particle-based spell effects for a voxel game: lightning bolts and water balls."
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["voxel", "game", "particles", "spells", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxspell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
