[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greatshop"
version = "0.1.0"
description = "A small terminal shop that lists products and demonstrates classic sorting algorithms on them."
requires-python = ">=3.10"
keywords = ["sorting", "algorithms", "education", "e-commerce", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
greatshop = "greatshop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["greatshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
