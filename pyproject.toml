[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vscc"
version = "0.1.0"
description = "A very small C compiler that turns a tiny subset of C into x86-64 assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "c", "x86-64", "assembly", "lexer", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vscc = "vscc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vscc"]

[tool.pytest.ini_options]
addopts = "-ra"
