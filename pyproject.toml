[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shottower"
version = "0.1.0"
description = "Data models, validation, routing helpers and render callbacks for a JSON-driven video, image and audio editing service"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "rendering", "editing", "api", "validation", "webhooks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shottower"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
