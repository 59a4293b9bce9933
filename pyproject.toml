[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kpkboard"
version = "0.1.0"
description = "Chess bitboard primitives, sliding-piece attack tables, a KPK endgame bitbase and benchmark command lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "sliding attacks", "endgame", "bitbase", "kpk"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kpkboard"]

[tool.pytest.ini_options]
addopts = "-ra"
