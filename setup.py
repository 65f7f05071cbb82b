"""
Ledger Runtime Setup
"""

from setuptools import setup, find_packages

setup(
    name="ledger-runtime",
    version="0.1.0",
    author="Ledger Runtime Team",
    description="Minimal deterministic ledger runtime with composable pallets",
    packages=find_packages(include=["ledger_runtime", "ledger_runtime.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pycryptodome>=3.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-timeout>=2.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ledger-runtime-demo=ledger_runtime.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Distributed Computing",
    ],
    keywords="blockchain ledger runtime pallet state-machine",
)
