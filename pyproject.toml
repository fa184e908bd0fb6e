[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuvmat"
version = "0.1.0"
description = "Integer YUV 4:2:0 / RGB pixel conversions and a small channel-aligned blob matrix"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["yuv", "nv21", "nv12", "yuv420sp", "argb", "rgb565", "image", "conversion", "matrix"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["yuvmat"]

[tool.pytest.ini_options]
addopts = "-ra"
