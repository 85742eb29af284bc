[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timetoforget"
version = "0.1.0"
description = "A bilingual text adventure played in the terminal, driven by a CSV dialogue table"
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "interactive fiction", "terminal game", "role-playing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
timetoforget = "timetoforget.application:main"

[tool.hatch.build.targets.wheel]
packages = ["timetoforget"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
