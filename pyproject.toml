[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "broco"
version = "1.0.0"
description = "Packed packet definitions with CRC-16 and a framed message bus for CAN FD, character devices and network links"
requires-python = ">=3.10"
dependencies = []
keywords = ["can", "can-fd", "socketcan", "message-bus", "packets", "crc16", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["broco"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"
