"""Package setup for anz_bank_client."""

from setuptools import setup, find_packages

setup(
    name="anz-bank-client",
    version="1.0.0",
    description="Session client for ANZ New Zealand internet banking accounts and transactions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "cryptography>=41.0.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "anz-bank-client=anz_bank_client.cli:main",
        ],
    },
)
