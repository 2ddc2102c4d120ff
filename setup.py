"""
setup.py

Packaging metadata and CLI entry point for code-bundler.

The CLI is a click group with two subcommands: 'bundle' concatenates source
files into a single file and 'create-rsp' saves bundle options to a
response file that can be replayed with '@response.rsp'.
"""
from setuptools import setup, find_packages

setup(
    name="code-bundler",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "pyyaml",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "code-bundler=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
