[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmimetro"
version = "0.1.0"
description = "Resistance meter logic with E24 colour-band matching, plus SSD1306 display, 5x5 RGB LED matrix, RGB LED and buzzer models"
requires-python = ">=3.10"
dependencies = []
keywords = ["ohmmeter", "resistor", "e24", "color-code", "ssd1306", "led-matrix", "adc", "pwm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ohmimetro = "ohmimetro.ohmmeter:main"
ohmimetro-argb = "ohmimetro.converter:main"

[tool.hatch.build.targets.wheel]
packages = ["ohmimetro"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
