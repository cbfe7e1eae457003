[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contourvec"
version = "0.1.0"
description = "Trace the contours of black-and-white images and write them as polylines or Bézier curves in EPS."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "contour",
    "vectorization",
    "bezier",
    "douglas-peucker",
    "eps",
    "postscript",
    "bitmap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contourvec-distance = "contourvec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contourvec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
