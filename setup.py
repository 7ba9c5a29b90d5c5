# setup.py
from setuptools import setup, find_packages

setup(
    name="assertion-schema",          # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),   # will find assertion_schema/
    install_requires=["pandas"],      # DataFrame row validation
    python_requires=">=3.9",
    description="Composable runtime assertions for untyped values (JSON payloads, configs, DataFrames)",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
