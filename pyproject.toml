[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omwkit"
version = "0.1.0"
description = "Small utilities: 128-bit integers, BCD conversion, big-endian encoding, checksums, a monotonic clock, ANSI escape sequences and colours"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "int128",
    "bcd",
    "double-dabble",
    "crc16",
    "kermit",
    "parity",
    "ansi",
    "escape-sequences",
    "sgr",
    "color",
    "alpha-compositing",
    "big-endian",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["omwkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
