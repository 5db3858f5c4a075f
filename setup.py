"""
setup.py

Packaging metadata and CLI entry point for the Fizop validator.

Version: 1.0.0. Two-phase validation of Fizop operator catalogs
(structural schema plus locale and image semantics), document retrieval
from files, URLs and npm packages, and the `fizop validate` command.
"""
from setuptools import setup, find_packages

setup(
    name="fizop-validator",
    version="1.0.0",
    packages=find_packages(include=["fizop", "fizop.*", "cli", "cli.*"]),
    install_requires=[
        "click",
        "pydantic>=2.5",
        "requests",
        "python-dotenv",
        "PyYAML",
        "langcodes",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "fizop=cli:cli",
        ],
    },
    python_requires=">=3.9",
)
