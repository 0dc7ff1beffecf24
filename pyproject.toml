[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pumlstate"
version = "0.7.0"
description = "Parse PlantUML state diagrams and their transition labels into plain Python data"
requires-python = ">=3.10"
dependencies = []
keywords = ["fsm", "state-machine", "plantuml", "parser", "uml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pumlstate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
