#!/usr/bin/env python3
"""Setup script for qdedupe package.
"""

from setuptools import find_packages, setup

setup(
    name="qdedupe",
    version="0.3.0",
    description="Near-duplicate question clustering from pairwise similarity scores",
    author="Exam Tools Team",
    packages=find_packages(include=["qdedupe*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=1.5.0",
        "pyyaml>=6.0",
        "openpyxl>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pandas-stubs>=2.0.0",
            "types-PyYAML>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "qdedupe-cluster=qdedupe.cli:main",
        ],
    },
)
