# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()


requirements = ["lief>=0.14.0"]


setup(
    name='sndemangle',
    # note to self: always change this in config as well.
    version='0.3.0',
    description='A demangler for Scala Native symbol names, with LIEF based symbol extraction from ELF, Mach-O and PE files.',
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=find_packages(exclude=('tests', 'docs')),
    install_requires=requirements,
    python_requires='>=3.7',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Disassemblers",
    ],
)
