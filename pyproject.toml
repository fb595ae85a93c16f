[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "midikit"
version = "0.1.0"
description = "MIDI 1.0 byte helpers: running status, VLQ, notes and intervals, MMC, RPN and NRPN"
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "mmc", "rpn", "nrpn", "running-status", "vlq", "music"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["midikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
