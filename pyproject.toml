[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfpeek"
version = "0.1.0"
description = "Inspect uncompressed PDF files: count pages, list fonts and save page images."
requires-python = ">=3.10"
keywords = ["pdf", "fonts", "images", "xref", "viewer"]
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
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[project.scripts]
pdfpeek = "pdfpeek.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pdfpeek"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
