[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shortcutter"
version = "0.1.0"
description = "Fuzzy-searchable terminal picker for zsh keyboard shortcuts"
requires-python = ">=3.11"
keywords = ["zsh", "shortcuts", "keybindings", "terminal", "fuzzy", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shortcutter = "shortcutter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shortcutter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
