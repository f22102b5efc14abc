"""Structure Engine package setup."""
from setuptools import setup, find_packages

setup(
    name="structure-engine",
    version="0.1.0",
    description="Deterministic ICT/SMC market-structure analysis for OHLC candle series",
    author="Your Name",
    author_email="your.email@example.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ]
    },
)
