[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jtml"
version = "0.1.0"
description = "Convert and format JTML, a compact bracket-based markup that compiles to HTML"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "markup", "template", "formatter", "converter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jtml-convert = "jtml.cli:convert_main"
jtml-format = "jtml.cli:format_main"

[tool.hatch.build.targets.wheel]
packages = ["jtml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
