[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mosslib"
version = "0.1.0"
description = "A small utility library: an ordered bidirectional map, environment-gated debug printing and a ready-handshake TCP client."
requires-python = ">=3.10"
dependencies = []
keywords = ["bimap", "bidirectional map", "tcp", "client", "debug"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mosslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
