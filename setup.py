"""
Setup script for mlkit

Pure-Python package laid out under src/. All metadata lives here:
1. Version is read from src/mlkit/__init__.py
2. Long description is read from README.md when present
3. Runtime dependencies are numpy and scipy; cupy is an optional backend
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/mlkit/__init__.py
def get_version():
    version_file = Path("src/mlkit/__init__.py")
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
    name="mlkit",
    version=get_version(),
    description="Machine learning kernels: activation functions, string encoding "
                "policies and binding parameter helpers",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.22",
        "scipy>=1.11",
    ],
    extras_require={
        "gpu": ["cupy"],
        "test": ["pytest>=7"],
    },
    zip_safe=True,
)
