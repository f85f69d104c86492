[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pitwall"
version = "0.1.0"
description = "A Formula One team season simulator: engineering, testing, logistics and race weekends."
requires-python = ">=3.10"
dependencies = []
keywords = ["formula one", "simulation", "racing", "motorsport", "design patterns"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pitwall = "pitwall.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pitwall"]

[tool.pytest.ini_options]
addopts = "-ra"
