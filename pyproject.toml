[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "pendu"
version = "1.0.0"
description = "Hangman word-guessing game with French and English dictionaries and a Tk interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["hangman", "pendu", "game", "word game", "tkinter"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pendu = "pendu.app:main"

[tool.setuptools.packages.find]
include = ["pendu*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
