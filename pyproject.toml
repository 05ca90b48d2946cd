[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cometix-tui"
version = "1.1.2"
description = "State, layout and text rendering for the components of a status line configurator: main menu, color and icon pickers, separator, option and name editors, help bar."
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "statusline", "color-picker", "layout", "configurator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cometix_tui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
