# setup.py
from setuptools import setup, find_packages

setup(
    name="rational_approx",
    version="0.1.0",
    description="Approximate real numbers by small irreducible fractions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
        "matplotlib",
        "pillow",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "rational-approx = rational_approx.cli:main",
        ],
    },
)
