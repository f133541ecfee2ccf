[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "entropyzero"
version = "0.1.0"
description = "Headless scientific simulations: a particle system, a binary-star spiral emitter and an FDTD ripple tank"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["physics", "simulation", "waves", "ripple tank", "particles", "fdtd", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
entropyzero = "entropyzero.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["entropyzero"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
