#!/usr/bin/env python
"""
Setup.py for pygraphkit.
"""

from setuptools import find_packages, setup

setup(
    name="pygraphkit",
    version="0.1.0",
    description="Interchangeable graph representations with MST, Euler tour and bipartite matching algorithms",
    packages=find_packages(include=["graphkit", "graphkit.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
