[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svart"
version = "0.1.5"
description = "A small library for representing genomic variants and regions."
requires-python = ">=3.10"
dependencies = []
keywords = ["genomics", "bioinformatics", "variants", "regions", "contig", "strand", "vcf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["svart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
