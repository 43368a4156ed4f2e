[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuvblend"
version = "1.0.0"
description = "Overlay a 24-bit BMP image onto every frame of a raw YUV420 video."
requires-python = ">=3.10"
dependencies = []
keywords = ["yuv", "yuv420", "i420", "bmp", "video", "overlay", "raw video"]
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
    "Topic :: Multimedia :: Video :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yuvblend = "yuvblend.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yuvblend"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
