[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pageformat"
version = "0.1.0"
description = "Interactive plain-text formatter: fixed line width, paragraph indents and page numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "formatter", "line width", "pagination", "paragraph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pageformat = "pageformat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pageformat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
