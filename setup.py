#!/usr/bin/env python3
"""
Setup script for the poker_equity package.
This package provides hand evaluation, range expansion and Monte Carlo equity
for Texas Hold'em, plus the Flask API in webapp/app.py.
"""

from setuptools import setup, find_packages

setup(
    name="poker-equity",
    version="1.0.0",
    description="Texas Hold'em range equity calculator",
    author="AI Poker Coach Team",
    package_dir={"": "webapp"},
    packages=find_packages(where="webapp", exclude=["tests", "tests.*"]),
    py_modules=["app"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
        "flask-cors>=3.0",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
