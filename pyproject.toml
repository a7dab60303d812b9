[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robosim"
version = "1.0.0"
description = "A small two-dimensional simulator of autonomous and remote-controlled robots among square obstacles."
requires-python = ">=3.10"
dependencies = []
keywords = ["robot", "simulation", "collision", "obstacle-avoidance", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
robosim = "robosim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["robosim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
