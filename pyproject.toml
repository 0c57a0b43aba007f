[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textpad"
version = "1.0.0"
description = "A small plain-text editor with New/Open/Save, clipboard editing and a file status line"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "notepad", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textpad = "textpad.window:main"

[tool.hatch.build.targets.wheel]
packages = ["textpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
