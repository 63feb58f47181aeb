#!/usr/bin/env python

from setuptools import setup

setup(
    name="podinstaller",
    version="0.1.0",
    packages=[
        "podinstaller",
        "podinstaller.details",
        "podinstaller.details.tools",
        "podinstaller.generators",
        "podinstaller.installer",
        "podinstaller.project",
    ],
    python_requires=">=3.9",
    install_requires=["packaging"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["podinstaller = podinstaller.__main__:main"]},
)
