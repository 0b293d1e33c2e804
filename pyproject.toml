[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "castleshadows"
version = "0.1.0"
description = "Castle of Shadows: a side-scrolling action game with flying demons and a dragon boss"
requires-python = ">=3.10"
keywords = ["game", "side-scroller", "arcade", "pygame", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
castle-of-shadows = "castleshadows.app:main"

[tool.hatch.build.targets.wheel]
packages = ["castleshadows"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
