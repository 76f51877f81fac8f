[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statechain"
version = "0.1.0"
description = "A minimal blockchain state machine with system, balances and proof-of-existence pallets"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "state machine", "runtime", "pallet", "dispatch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
statechain = "statechain.runtime:main"

[tool.hatch.build.targets.wheel]
packages = ["statechain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
