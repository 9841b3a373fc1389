[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workbench"
version = "0.1.0"
description = "Small command-line utilities: AVL tree demo, Unicode charts, ANSI colours, GPT reader, Intel HEX decoder, PNG plotter, GBK converter, largest-file finder and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "avl-tree",
    "unicode",
    "ansi-colors",
    "gpt",
    "intel-hex",
    "png",
    "gbk",
    "utilities",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
workbench-tree = "workbench.treedemo:main"
workbench-charmap = "workbench.charmap:main"
workbench-colors = "workbench.colors:main"
workbench-gpt = "workbench.gpt:main"
workbench-hex = "workbench.intelhex:main"
workbench-plot = "workbench.plotpng:main"
workbench-gbk2utf8 = "workbench.gbk2utf8:main"
workbench-largest = "workbench.largest:main"
workbench-ascii-only = "workbench.asciionly:main"
workbench-locale = "workbench.localeinfo:main"

[tool.hatch.build.targets.wheel]
packages = ["workbench"]

[tool.pytest.ini_options]
addopts = "-ra"
