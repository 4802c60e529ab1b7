[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursegen"
version = "0.1.0"
description = "Generate planar target courses made of circular arcs for path-following robots"
requires-python = ">=3.10"
dependencies = []
keywords = ["path", "trajectory", "course", "robotics", "path-following", "arc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursegen = "coursegen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coursegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
