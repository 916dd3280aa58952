[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tagwm"
version = "0.1.0"
description = "Building blocks for a tag-based tiling window manager: clients, monitors, size hints, bar geometry and text measurement"
requires-python = ">=3.10"
dependencies = []
keywords = ["window-manager", "tiling", "tags", "size-hints", "status-bar", "utf-8", "box-drawing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tagwm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
