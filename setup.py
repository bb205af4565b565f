from setuptools import setup, find_packages

setup(
    name="webvtt-reader",
    version="0.1.0",
    description="Strict reader for WebVTT caption documents",
    author="Valerio Galano",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "PyYAML>=6.0",
    ],
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "webvtt-reader=webvtt_reader.cli:main",
        ],
    },
)
