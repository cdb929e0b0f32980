"""
Setup script for makegl

This setup.py is primarily for compatibility. The main configuration is in pyproject.toml.
However, this script handles:
1. Reading the version from makegl/__init__.py
2. Shipping the Jinja2 templates with the package
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from makegl/__init__.py
def get_version():
    version_file = Path("makegl/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    version=get_version(),
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["makegl", "makegl.*"]),
    package_data={"makegl": ["templates/*/*.j2"]},
    zip_safe=False,
)
