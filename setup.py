# setup.py
from setuptools import setup, find_packages

setup(
    name="gameclock",
    version="1.0.0",
    description="Frame clock for Python game loops: delta time, FPS, stopwatch, game calendar",
    packages=find_packages(include=["gameclock", "gameclock.*"]),
    install_requires=[
        "glfw>=2.5.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
