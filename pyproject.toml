[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spotify-tui"
version = "0.1.0"
description = "Building blocks for a terminal music player: key bindings, input events, OAuth redirect capture, and table, playbar and help text helpers."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["spotify", "terminal", "tui", "music", "player", "keybindings", "oauth"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spotify_tui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
