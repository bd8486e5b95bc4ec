[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcemu"
version = "0.1.0"
description = "Timing, model description and debugger state for a scientific calculator emulator"
requires-python = ">=3.10"
keywords = ["emulator", "calculator", "debugger", "hex editor", "breakpoints", "disassembly"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Debuggers",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["calcemu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
