[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "egepix"
version = "0.1.0"
description = "In-memory 32-bit ARGB pixel images: blitting, alpha blending, blurring, textured triangles, rotation, BMP/PNG output and a Mersenne Twister"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["graphics", "pixels", "blit", "alpha-blending", "blur", "rotation", "png", "bmp", "mersenne-twister"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["egepix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
