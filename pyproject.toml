[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triagem"
version = "0.1.0"
description = "Terminal triage desk: patient register, service queue, age-priority queue, undo log and date/age indexes"
requires-python = ">=3.10"
dependencies = []
keywords = ["triage", "patients", "queue", "heap", "binary-search-tree", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
triagem = "triagem.app:main"

[tool.hatch.build.targets.wheel]
packages = ["triagem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
