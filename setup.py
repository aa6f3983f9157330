# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Setup configuration for microsoft-login package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="microsoft-login",
    version="0.1.0",
    author="microsoft-login contributors",
    description="Minimal OAuth2 Authorization Code flow helper for Login with Microsoft",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27.0",  # For token and Graph profile HTTP requests
        "pydantic>=2.4.0",  # For typed token/profile response models
        "starlette>=0.49.1",  # For deriving the redirect context from a request
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pylint>=3.0.0",
            "mypy>=1.0.0",
        ],
    },
)
