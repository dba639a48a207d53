[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebui"
version = "0.1.0"
description = "Frame-redrawn user interface widgets: row and grid layouts, text, labels, text input, scroll containers, tool tips and radio groups"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "widgets", "layout", "user-interface", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ebui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
