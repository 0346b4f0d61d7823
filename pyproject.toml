[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valuesliders"
version = "1.0.0"
description = "Draggable, typeable numeric value sliders with optional bounds, plus a small Tk view and demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["slider", "widget", "tkinter", "gui", "input"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Widget Sets",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
valuesliders-demo = "valuesliders.view:main"

[tool.hatch.build.targets.wheel]
packages = ["valuesliders"]

[tool.pytest.ini_options]
addopts = "-ra"
