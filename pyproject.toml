[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paquetes"
version = "0.1.0"
description = "A minimal TCP client and server that exchange length-prefixed messages and packets of values"
requires-python = ">=3.10"
dependencies = []
keywords = ["socket", "tcp", "serialization", "client", "server", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
paquetes-client = "paquetes.client:main"
paquetes-server = "paquetes.server:main"

[tool.hatch.build.targets.wheel]
packages = ["paquetes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
