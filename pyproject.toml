[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picosnake"
version = "0.1.0"
description = "Snake on a 5x5 LED matrix, with software models of an SSD1306 display, a buzzer and a joystick"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "led-matrix", "ssd1306", "neopixel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
picosnake = "picosnake.app:main"

[tool.hatch.build.targets.wheel]
packages = ["picosnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
