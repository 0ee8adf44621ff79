[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multivideo"
version = "0.1.0"
description = "Play up to four video files side by side in a 2x2 grid with shared controls."
requires-python = ">=3.10"
keywords = ["video", "player", "grid", "tkinter", "multiview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Display",
]
dependencies = [
    "imageio",
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
multivideo = "multivideo.app:main"

[project.gui-scripts]
multivideo-gui = "multivideo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["multivideo"]

[tool.pytest.ini_options]
addopts = "-ra"
