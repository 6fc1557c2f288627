[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mipspipe"
version = "0.1.0"
description = "Cycle-level simulator of a five-stage MIPS pipeline with stall-based hazard handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["mips", "pipeline", "simulator", "cpu", "emulator", "computer-architecture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mipspipe = "mipspipe.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["mipspipe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
