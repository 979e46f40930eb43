[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortlab"
version = "0.1.0"
description = "Teaching lab: sorting algorithms on 3D arrays and vectors with timing tables, a threaded function tabulator and a producer/consumer queue demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "selection sort", "bubble sort", "benchmark", "threads", "education"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortlab = "sortlab.menu:main"
sortlab-tabulate = "sortlab.tabulation:main"
sortlab-queue = "sortlab.queue_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sortlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
