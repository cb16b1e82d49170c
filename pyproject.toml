[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "highwayhash"
version = "1.0.0"
description = "HighwayHash in pure Python: a keyed pseudorandom function producing 64, 128 or 256-bit hashes"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "highwayhash", "keyed-hash", "prf", "checksum"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
highwayhash = "highwayhash.cli:main"
highwayhash-benchmark = "highwayhash.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["highwayhash"]

[tool.hatch.build.targets.sdist]
include = ["highwayhash", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["highwayhash"]
