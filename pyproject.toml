[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathcomment"
version = "0.1.1"
description = "Command-line tool that prepends each source file's relative path as a comment on its first line"
requires-python = ">=3.10"
dependencies = []
keywords = ["comments", "source code", "paths", "headers", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathcomment = "pathcomment.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pathcomment"]

[tool.pytest.ini_options]
addopts = "-ra"
