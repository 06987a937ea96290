[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdvram"
version = "0.2.0"
description = "Mega Drive VDP data structures: pattern names, tiles, VRAM, plane tables, sprite mapping and DPLC entries"
requires-python = ">=3.10"
dependencies = []
keywords = ["mega drive", "genesis", "vdp", "tiles", "vram", "mappings", "dplc"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["mdvram"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
