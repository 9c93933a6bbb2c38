[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtfsplit"
version = "0.1.0"
description = "Split large paged RTF reports into smaller RTF files of a fixed number of pages"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtf", "report", "split", "pages"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtfsplit = "rtfsplit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rtfsplit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
