[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "savescan"
version = "0.1.0"
description = "Building blocks for de-duplicating, filtering and backing up game save data"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["backup", "games", "save data", "registry", "restore"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Backup",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["savescan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
