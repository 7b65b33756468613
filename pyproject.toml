[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravwell"
version = "0.1.0"
description = "A small 2D space arcade game with a black hole, parallax starfields and an enemy ship"
requires-python = ">=3.10"
keywords = ["game", "arcade", "space", "gravity", "pygame", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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
gravwell = "gravwell.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gravwell"]

[tool.hatch.build.targets.sdist]
include = ["gravwell", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
