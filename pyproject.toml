[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokerush"
version = "1.0.0"
description = "Terminal obstacle-course game where two Pokémon must reach the finish line at the same time."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "pokemon", "ansi", "tui", "obstacle-course"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokerush = "pokerush.juego:main"

[tool.hatch.build.targets.wheel]
packages = ["pokerush"]

[tool.hatch.build.targets.sdist]
include = ["pokerush", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
