[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unitimetable"
version = "0.1.0"
description = "University timetable model, scoring rules and demo data for constraint-based scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = ["timetable", "scheduling", "constraints", "university", "planning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unitimetable"]

[tool.pytest.ini_options]
addopts = "-ra"
