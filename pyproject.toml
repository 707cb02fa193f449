[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapeforms"
version = "1.0.0"
description = "2D primitives with 4x4 affine transforms and a backend-free frame renderer"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["graphics", "transform", "primitives", "rendering", "matrix", "shader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapeforms = "shapeforms.renderer:main"

[tool.hatch.build.targets.wheel]
packages = ["shapeforms"]

[tool.pytest.ini_options]
addopts = "-ra"
