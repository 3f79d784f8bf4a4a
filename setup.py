# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from setuptools import setup, find_packages
import version

TESTS_REQUIRE = [
    "pytest >= 7.0",
]

setup(
    author="Aiven",
    author_email="support@aiven.io",
    entry_points={
        "console_scripts": [
            "correct-word = correct_word.__main__:main",
        ],
    },
    install_requires=[],
    extras_require={
        "completion": ["argcomplete"],
        "test": TESTS_REQUIRE,
    },
    license="Apache 2.0",
    name="correct-word",
    packages=find_packages(exclude=["tests"]),
    platforms=["POSIX", "MacOS", "Windows"],
    description="Spelling correction suggestions from a candidate word list",
    long_description=open("README.rst").read(),
    python_requires=">=3.8",
    url="https://aiven.io/",
    version=version.get_project_version("correct_word/version.py"),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
