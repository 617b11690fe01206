[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asteroidfield"
version = "1.0.0"
description = "A small arcade asteroid shooter with a minimal entity, scene, sprite, sound and input engine"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["asteroids", "arcade", "game", "pygame", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
asteroidfield = "asteroidfield.app:main"

[tool.hatch.build.targets.wheel]
packages = ["asteroidfield"]

[tool.pytest.ini_options]
addopts = "-ra"
