[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boogakit"
version = "0.1.0"
description = "Small utilities: strings, printf-style formatting, UTF-8/UTF-16 decoding, paths, LCG random numbers, sorting, profiling, lane-wise vector arithmetic and file helpers"
requires-python = ">=3.10"
keywords = ["strings", "formatting", "utf8", "random", "lcg", "radix-sort", "profiling", "vector-math"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["boogakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
