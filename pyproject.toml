[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "desafios"
version = "0.1.0"
description = "Small terminal games: battleship ship placement, a simplified chess board and Super Trunfo card comparisons"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "battleship", "chess", "super trunfo", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
batalha-naval = "desafios.batalha_naval:main"
xadrez = "desafios.xadrez:main"
super-trunfo = "desafios.super_trunfo:main"
super-trunfo-logica = "desafios.super_trunfo_logica:main"

[tool.hatch.build.targets.wheel]
packages = ["desafios"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
