[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kliker"
version = "0.1.0"
description = "A small clicker game: click for gold, buy upgrades and an auto-clicker."
requires-python = ">=3.10"
keywords = ["game", "clicker", "idle", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kliker = "kliker.game:main"

[tool.hatch.build.targets.wheel]
packages = ["kliker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
