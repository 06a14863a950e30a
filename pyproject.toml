[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samdrawer"
version = "0.1.0"
description = "Build suffix automata, including generalised ones over several strings, and draw them as Graphviz DOT or SVG"
requires-python = ">=3.10"
dependencies = []
keywords = ["suffix automaton", "sam", "generalized suffix automaton", "graphviz", "dot", "svg", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
samdrawer = "samdrawer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["samdrawer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
