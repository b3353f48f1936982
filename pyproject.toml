[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oceangoing"
version = "0.1.0"
description = "Game logic for a pirate ship arcade game: upgrades, ship configurations, levels, saves, ships, cannons and drops."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "pirate", "ships", "arcade", "upgrades", "collision"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oceangoing"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
