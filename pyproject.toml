[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tideframe"
version = "0.1.0"
description = "8-bit indexed framebuffer toolkit: pixels, circles, a 5x7 font, sprites, hex dumps and an XMODEM receiver"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "framebuffer",
    "graphics",
    "sprites",
    "bitmap-font",
    "xmodem",
    "retro",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tideframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
