"""Setup script for extkit."""

from setuptools import find_packages, setup

setup(
    name="extkit",
    version="0.1.0",
    description="Helper functions for collections, primitives and DB-API data access",
    author="extkit Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=2.0.0",  # Null detection and DataFrame readers
        "pyyaml>=6.0",  # Configuration handling
        "python-dotenv>=1.0.0",  # .env loading
    ],
    package_data={
        "extkit": ["py.typed"],
    },
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.1.0",
            "black>=22.1.0",
            "isort>=5.10.1",
            "flake8>=4.0.1",
            "mypy>=1.0.0",  # Type checking
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.1.0",
            "duckdb>=1.2.0",  # In-memory DB-API connections for reader tests
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
