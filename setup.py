"""Setup module for zigcatalog"""

import pathlib

from setuptools import find_packages, setup

import zigcatalog

REQUIRES = [
    "attrs",
    "frozendict",
    "voluptuous",
]

setup(
    name="zigcatalog",
    version=zigcatalog.__version__,
    description="Catalogue of Zigbee device definitions and device matching",
    long_description=(pathlib.Path(__file__).parent / "README.md").read_text(),
    long_description_content_type="text/markdown",
    license="GPL-3.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=REQUIRES,
    extras_require={
        "testing": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.9",
)
