#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="probstat",
    version="0.1.0",
    description="Discrete distributions with numerical quantiles and exact integer descriptive statistics",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",

    # finds probstat/ and its subpackages, but excludes tests, docs, etc.
    packages=find_packages(exclude=["tests*", "docs*", "notebooks*"]),

    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20",
        "scipy>=1.7",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "flake8",
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],

    include_package_data=False,
)
