# coding: utf-8

import sys

from setuptools import find_packages, setup

from charmap import VERSION

needs_pytest = {"pytest", "test", "ptr"}.intersection(sys.argv)
pytest_runner = ["pytest-runner"] if needs_pytest else []

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="python-charmap",
    version=VERSION,
    description="Table driven conversion between legacy 8-bit encodings and Unicode",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "docs.*"]),
    install_requires=["construct>=2.10", "python-slugify>=4.0.1"],
    python_requires=">=3.10",
    setup_requires=["wheel"] + pytest_runner,
    tests_require=[
        "pytest",
        "pytest-mock",
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Text Processing",
    ],
    extras_require={
        "YAML": ["pyyaml>=5.2.0"],
        "test": ["pytest", "pytest-mock", "pyyaml>=5.2.0"],
    },
)
