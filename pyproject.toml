[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saturn"
version = "0.1.0"
description = "A small arcade game: dodge the sliding stones and push the ball to the bottom of the screen"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "observer"]
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
saturn = "saturn.app:main"

[tool.hatch.build.targets.wheel]
packages = ["saturn"]

[tool.pytest.ini_options]
addopts = "-ra"
