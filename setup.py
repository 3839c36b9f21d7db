#!/usr/bin/env python3

import setuptools
import mpq_version

with open("README.md", "r") as fd:
    long_description = fd.read()

setuptools.setup(
    name="pympq",
    version=mpq_version.version,
    author="The PyMPQ developers",
    description="Exact rational numbers over any arbitrary precision integer",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    py_modules=["mpq_version"],
    python_requires=">=3.6, <4",
    extras_require={
        "gmp"  : ["gmpy2"],
        "test" : ["pytest"],
        "docs" : ["sphinx"],
    },
    entry_points={
        "console_scripts" : [
            "mpq-eval = mpq.evaluator:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries",
    ],
)
