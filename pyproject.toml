[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmenukit"
version = "0.1.0"
description = "Building blocks for a handheld game-console launcher menu: settings, dialogs, surfaces, translations and power handling"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["launcher", "menu", "handheld", "settings", "skins", "translations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gmenukit-run = "gmenukit.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["gmenukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
