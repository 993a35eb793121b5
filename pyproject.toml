[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoodyquest"
version = "0.1.0"
description = "A small top-down arcade game: collect coins, grab a power-up, and slash a chasing enemy."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "sprites", "lighting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hoodyquest = "hoodyquest.game:main"
hoodyquest-lighting = "hoodyquest.lighting:main"

[tool.hatch.build.targets.wheel]
packages = ["hoodyquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
