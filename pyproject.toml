[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pendulumviz"
version = "0.1.0"
description = "Double pendulum simulation, velocity visualisation, sonification and procedural colour images"
requires-python = ">=3.10"
keywords = [
    "double pendulum",
    "chaos",
    "phase space",
    "visualization",
    "sonification",
    "runge-kutta",
    "procedural image",
]
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
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pendulumviz-colorgen = "pendulumviz.colorgen:main"

[tool.hatch.build.targets.wheel]
packages = ["pendulumviz"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
