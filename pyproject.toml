[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "borof"
version = "0.1.0"
description = "A two-player platform arena on sliding platforms, with a bouncing-balls variant"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "platformer", "two-player", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
borof = "borof.app:main"

[tool.hatch.build.targets.wheel]
packages = ["borof"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
