[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kmertools"
version = "0.1.0"
description = "Compressed k-mer representations for DNA and amino acid sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["kmer", "dna", "amino-acid", "bioinformatics", "sequence", "2-bit encoding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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
packages = ["kmertools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
