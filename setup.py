#!/usr/bin/env python3
"""
Setup configuration for the HIBC UDI Encoder
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="hibc-udi-encoder",
    version="1.0.0",
    author="HIBC UDI Team",
    author_email="",
    description="HIBC 2.5 Unique Device Identification (UDI) data structure encoder",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples", "scripts", "cli", "modules"]),
    python_requires=">=3.8",
    install_requires=[
        # No external dependencies for the encoder itself; the label
        # generator's batch/report helpers need these
        "pandas>=1.5",
        "openpyxl>=3.0",
        "reportlab>=3.6",
        "python-dateutil>=2.8",
    ],
    extras_require={
        "app": [
            "streamlit>=1.28",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hibc-encode=hibc_udi.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Healthcare Industry",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords="hibc udi barcode medical-device healthcare labeling mod43",
)
