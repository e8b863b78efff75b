[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gigasound"
version = "0.1.0"
description = "Core logic of a polyphonic MIDI keyboard: scales, MIDI messages, LED encoding, input handling, simulated flash, USB descriptors and a 1-bit framebuffer."
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "mpe", "keyboard", "framebuffer", "ssd1306", "ws2812", "usb-descriptors"]
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
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gigasound"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
