#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup configuration for the wallet SDK package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="djuno-wallet-sdk",
    version="0.1.0",
    author="Djuno",
    description="Async Python client and state store for the Djuno custodial wallet API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://wallets.djuno.cloud",
    packages=find_packages(include=["core", "core.*", "wallet_sdk", "wallet_sdk.*", "wallet_hook", "wallet_hook.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    include_package_data=True,
)
