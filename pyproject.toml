[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvbench"
version = "0.1.0"
description = "CoreMark kernels, Dhrystone 2.1 and small demo programs in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "coremark", "dhrystone", "crc", "state-machine", "matrix"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rvbench-dhrystone = "rvbench.dhrystone:main"
rvbench-programs = "rvbench.programs:main"

[tool.hatch.build.targets.wheel]
packages = ["rvbench"]

[tool.pytest.ini_options]
addopts = "-ra"
