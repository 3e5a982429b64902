[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gomokurs"
version = "0.1.0"
description = "A gomoku game manager that referees matches between AI programs over stdio or TCP."
requires-python = ">=3.11"
keywords = ["gomoku", "gomocup", "game manager", "board game", "ai"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
gomokurs = "gomokurs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gomokurs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
