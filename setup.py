# setup.py
from setuptools import setup, find_packages

setup(
    name="stackpp",
    version="0.2.0",
    description="A improved Stack machine programming language",
    packages=find_packages(include=["stackpp", "stackpp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["stackpp = stackpp.cli:main"],
    },
    zip_safe=False,
)
