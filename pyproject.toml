[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "videoteca"
version = "1.0.0"
description = "A small catalog of movies and series episodes with ratings, filters and an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "catalog", "movies", "series", "ratings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
videoteca = "videoteca.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["videoteca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
