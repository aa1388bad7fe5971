[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohfi"
version = "0.1.0"
description = "Lo-fi audio effect: bitcrusher and sample-and-hold downsampler with wet/dry mixing"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "bitcrusher", "downsampler", "lo-fi", "effect"]
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
    "Topic :: Multimedia :: Sound/Audio :: Editors",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ohfi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
