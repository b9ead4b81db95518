[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eldoria"
version = "0.0.1"
description = "Turn-based strategy game pieces: UI configuration and ruleset file loading, an API client, and client-side sprite, tile grid, text field and screen building blocks."
requires-python = ">=3.10"
keywords = ["game", "strategy", "turn-based", "tiles", "sprites", "ruleset"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = [
    "pyyaml",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["eldoria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
