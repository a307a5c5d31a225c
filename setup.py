from setuptools import setup, find_packages

setup(
    name="power_curve",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.24.0",
        "matplotlib>=3.7.0",
        "pyarrow>=10.0.0",
        "openpyxl>=3.1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "power-curve=power_curve.cli:main",
        ],
    },
    python_requires=">=3.8",
)
