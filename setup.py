# setup.py
from setuptools import setup, find_packages

setup(
    name="ccspan",
    version="0.1.0",
    packages=find_packages(include=["ccspan", "ccspan.*"]),
    install_requires=[
        "numba>=0.60.0",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description="Closed Contiguous Sequential Pattern Mining with a Pattern Trie and Numba",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
