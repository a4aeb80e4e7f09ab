[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fewt"
version = "0.1.0"
description = "A small file explorer: directory listings with file types, sorting, favourites, column browsing and a shell session."
requires-python = ">=3.10"
keywords = ["file manager", "file explorer", "directory listing", "miller columns", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]
dependencies = [
    "platformdirs",
    "toml",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fewt = "fewt.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fewt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
