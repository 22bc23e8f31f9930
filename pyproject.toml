[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cozybean"
version = "0.1.0"
description = "A small coffee-shop ordering counter: menu items, staff and an interactive ordering prompt."
requires-python = ">=3.10"
dependencies = []
keywords = ["coffee", "menu", "ordering", "point-of-sale", "cafe"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cozybean = "cozybean.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cozybean"]

[tool.pytest.ini_options]
addopts = "-ra"
