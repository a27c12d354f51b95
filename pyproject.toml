[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svgraster"
version = "0.1.0"
description = "Rasterize a small subset of SVG (shapes, groups, use, transforms) into PNG images"
requires-python = ">=3.10"
keywords = ["svg", "png", "raster", "rasterizer", "graphics", "conversion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
svgtopng = "svgraster.cli:main"
xmldump = "svgraster.xmldump:main"
svgraster-regression = "svgraster.regression:main"

[tool.hatch.build.targets.wheel]
packages = ["svgraster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
