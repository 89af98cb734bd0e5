[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hdrshot"
version = "0.1.0"
description = "HDR screenshot processing: tone mapping, pixel conversion, PNG and DIB output, hotkey and config handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["screenshot", "hdr", "tone-mapping", "png", "dib", "pq", "rec2020"]
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
    "Topic :: Multimedia :: Graphics :: Capture :: Screen Capture",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hdrshot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
