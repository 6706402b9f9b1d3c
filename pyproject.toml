[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lzfamily"
version = "0.1.0"
description = "Step-by-step LZ77, LZSS, LZ78 and LZW encoding and decoding tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["lz77", "lzss", "lz78", "lzw", "compression", "education"]
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
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lzfamily = "lzfamily.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lzfamily"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
