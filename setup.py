#!/usr/bin/env python3
"""
Setup script for meshslicer (plane cutting of triangle meshes)
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

requirements = [
    "numpy>=1.20.0",
    "trimesh>=4.0.0",
    "networkx>=2.6",
    "matplotlib>=3.5.0",
]

setup(
    name="meshslicer",
    version="0.1.0",
    description="Cut triangle meshes by a plane, inserting shared vertices on every crossing edge",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["meshslicer", "meshslicer.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "meshslicer=meshslicer.cli:main",
        ],
    },
)
