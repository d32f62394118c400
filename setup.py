#!/usr/bin/env python3
"""
Setup script for Fixtura.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="fixtura",
    version="0.1.0",
    description="Declarative test fixtures built from class blueprints",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Fixtura Contributors",
    packages=find_packages(include=["fixtura", "fixtura.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "pytest11": [
            "fixtura=fixtura.testing.fixtures",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: Pytest",
        "Topic :: Software Development :: Testing",
    ],
    keywords="testing fixtures blueprints factories",
)
