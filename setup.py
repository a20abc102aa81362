# setup.py
from setuptools import setup, find_packages

setup(
    name="pivot_levels",
    version="1.0.0",
    packages=find_packages(include=["pivot_levels", "pivot_levels.*"]),
    install_requires=[
        "pandas",
        "numpy",
        "pyqtgraph",
        "PyQt6",
        "python-dotenv",
        "pytz",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
