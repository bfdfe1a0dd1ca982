[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dissent"
version = "0.1.0"
description = "Core helpers for a chat client: color hashing, emoji sanitizing, event dispatch and channel naming."
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "colorhash", "emoji", "events", "channels"]
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
    "Topic :: Communications :: Chat",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dissent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
