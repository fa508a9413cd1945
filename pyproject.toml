[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "restotrees"
version = "0.1.0"
description = "Balanced search trees for restaurant chain records: ratings, sales, costs and monthly cuisine winners."
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "balanced tree", "restaurants", "sales", "ratings", "reporting"]
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
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["restotrees"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
