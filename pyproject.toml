[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genpattern"
version = "0.1.0"
description = "Place image silhouettes on a tileable canvas without overlaps, using simulated annealing."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["pattern", "tiling", "seamless", "simulated-annealing", "placement", "image"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["genpattern"]

[tool.pytest.ini_options]
addopts = "-ra"
