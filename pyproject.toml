[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcmath"
version = "0.1.0"
description = "Basic numerical methods: quadrature rules, linear interpolation, discrete Fourier transform, linear solvers and series experiments"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "integration",
    "quadrature",
    "interpolation",
    "fourier",
    "dft",
    "linear-systems",
    "gauss",
    "pentadiagonal",
    "series",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
calcmath = "calcmath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calcmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
