[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picgrid"
version = "0.1.0"
description = "A small desktop image viewer with a searchable thumbnail grid and a slideshow"
requires-python = ">=3.10"
keywords = ["image", "viewer", "slideshow", "thumbnails", "gallery", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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
]

[project.scripts]
picgrid = "picgrid.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["picgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
