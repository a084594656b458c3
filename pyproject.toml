[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typistconsole"
version = "0.1.0"
description = "A terminal typing tutor with random lessons, live feedback and speed and accuracy results."
requires-python = ">=3.10"
keywords = ["typing", "tutor", "terminal", "wpm", "keyboard", "practice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
typistconsole = "typistconsole.app:main"

[tool.hatch.build.targets.wheel]
packages = ["typistconsole"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
