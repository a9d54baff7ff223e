# flake8: noqa
from setuptools import setup, find_packages
from pathlib import Path

long_description = (Path(__file__).parent / "README.md").read_text()

exec(open("popdata/version.py").read())

setup(
    name="popdata-kit",
    version=__version__,
    description="Tool kits for merging population genetics data sets and simulating individuals",
    packages=find_packages(include=["popdata", "popdata.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "xarray",
        "tqdm",
        "structlog",
    ],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Intended Audience :: Science/Research",
    ],
    long_description=long_description,
    long_description_content_type="text/markdown",
)
